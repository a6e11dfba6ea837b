"""
Pydantic schemas for request/response validation
"""
from pydantic import BaseModel, Field, validator
from typing import Optional, List
import re

from .domain.models import Post, Comment, Author, Vote, PostType


class UserCredentials(BaseModel):
    """Registration and login request"""
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Token response"""
    token: str


class PostCreate(BaseModel):
    """Post creation request"""
    category: str
    type: PostType
    title: str = Field(..., min_length=1, max_length=300)
    text: Optional[str] = None
    url: Optional[str] = Field(None, max_length=2048)

    @validator('url')
    def validate_url(cls, v):
        """Validate link URL"""
        if v and not re.match(r'^https?://.+', v):
            raise ValueError('URL must start with http:// or https://')
        return v


class CommentCreate(BaseModel):
    """Comment creation request"""
    comment: Optional[str] = None


class AuthorSchema(BaseModel):
    """Post or comment author"""
    username: str
    id: str

    @classmethod
    def from_domain(cls, author: Author) -> "AuthorSchema":
        return cls(username=author.username, id=author.id)


class VoteSchema(BaseModel):
    """Vote as exposed to clients"""
    user: str
    vote: int

    @classmethod
    def from_domain(cls, vote: Vote) -> "VoteSchema":
        return cls(user=vote.user_id, vote=vote.value)


class CommentSchema(BaseModel):
    """Comment response"""
    body: str
    author: AuthorSchema
    created: str
    id: str

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentSchema":
        return cls(
            body=comment.body,
            author=AuthorSchema.from_domain(comment.author),
            created=comment.created,
            id=comment.id
        )


class PostResponse(BaseModel):
    """Post response"""
    score: int
    views: int
    type: str
    title: str
    category: str
    text: Optional[str] = None
    url: Optional[str] = None
    author: AuthorSchema
    votes: List[VoteSchema] = []
    comments: List[CommentSchema] = []
    upvote_percentage: int = Field(alias="upvotePercentage")
    id: str
    created: str

    class Config:
        populate_by_name = True

    @classmethod
    def from_domain(cls, post: Post) -> "PostResponse":
        return cls(
            score=post.score,
            views=post.views,
            type=post.type,
            title=post.title,
            category=post.category,
            text=post.text or None,
            url=post.url or None,
            author=AuthorSchema.from_domain(post.author),
            votes=[VoteSchema.from_domain(v) for v in post.votes],
            comments=[CommentSchema.from_domain(c) for c in post.comments],
            upvote_percentage=post.upvote_percentage,
            id=post.id,
            created=post.created
        )


class ValidationErrorItem(BaseModel):
    """Single field error in the forum's validation error shape"""
    location: str
    param: str
    value: Optional[str] = None
    msg: str


class ValidationErrorResponse(BaseModel):
    """Validation error response"""
    errors: List[ValidationErrorItem]


class MessageResponse(BaseModel):
    """Generic message response"""
    message: str
