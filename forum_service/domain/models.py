"""
Domain models - Core business entities
"""
from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum


UPVOTE = 1
DOWNVOTE = -1


class Category(str, Enum):
    """Forum sections a post can belong to"""
    MUSIC = "music"
    FUNNY = "funny"
    VIDEOS = "videos"
    PROGRAMMING = "programming"
    NEWS = "news"
    FASHION = "fashion"


class PostType(str, Enum):
    """Post type enumeration"""
    TEXT = "text"
    LINK = "link"


@dataclass
class Author:
    """Username and user ID pair attached to posts and comments"""
    username: str
    id: str


@dataclass
class Vote:
    """A single user's vote on a post"""
    user_id: str
    value: int


@dataclass
class Comment:
    """Comment domain model"""
    id: str
    body: str
    author: Author
    created: str

    def is_owner(self, user_id: str) -> bool:
        """Check if the given user_id wrote this comment"""
        return self.author.id == user_id


@dataclass
class Post:
    """Post domain model"""
    id: str
    type: str
    title: str
    category: str
    author: Author
    created: str
    text: str = ""
    url: str = ""
    views: int = 0
    score: int = 0
    upvote_percentage: int = 0
    votes: List[Vote] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)

    def is_owner(self, user_id: str) -> bool:
        """Check if the given user_id is the author of this post"""
        return self.author.id == user_id

    def find_vote(self, user_id: str) -> Optional[Vote]:
        for vote in self.votes:
            if vote.user_id == user_id:
                return vote
        return None

    def find_comment_index(self, comment_id: str) -> int:
        for index, comment in enumerate(self.comments):
            if comment.id == comment_id:
                return index
        return -1


@dataclass
class User:
    """User domain model"""
    username: str
    password: str
    id: str

    def check_password(self, password: str) -> bool:
        return self.password == password


@dataclass
class Session:
    """Session domain model"""
    id: str
    username: str
    user_id: str
