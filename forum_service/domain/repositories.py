"""
Repository interfaces - Define contracts for data access
"""
from abc import ABC, abstractmethod
from typing import List

from .models import Post, Comment, User, Session


class IPostRepository(ABC):
    """Post repository interface"""

    @abstractmethod
    def create_post(self, post: Post) -> None:
        """Register a post globally and under its category"""
        pass

    @abstractmethod
    def index_post_for_author(self, username: str, post: Post) -> None:
        """Append a post to its author's list"""
        pass

    @abstractmethod
    def get_post(self, post_id: str) -> Post:
        """Find post by ID"""
        pass

    @abstractmethod
    def record_view(self, post: Post) -> None:
        """Increment a post's view counter"""
        pass

    @abstractmethod
    def list_all_posts(self) -> List[Post]:
        """List every stored post"""
        pass

    @abstractmethod
    def list_posts_by_category(self, category: str) -> List[Post]:
        """List posts in a category"""
        pass

    @abstractmethod
    def add_comment(self, post_id: str, comment: Comment) -> None:
        """Append a comment to a post"""
        pass

    @abstractmethod
    def delete_comment(self, post: Post, comment_id: str, user_id: str) -> None:
        """Remove a comment written by user_id"""
        pass

    @abstractmethod
    def apply_vote(self, post: Post, user_id: str, value: int) -> None:
        """Record or replace a user's vote"""
        pass

    @abstractmethod
    def clear_vote(self, post: Post, user_id: str) -> None:
        """Remove a user's vote"""
        pass

    @abstractmethod
    def delete_post(self, post: Post, author_username: str, user_id: str) -> None:
        """Remove a post from every index"""
        pass

    @abstractmethod
    def list_posts_by_author(self, username: str) -> List[Post]:
        """List posts written by username"""
        pass


class IUserRepository(ABC):
    """User repository interface"""

    @abstractmethod
    def check_credentials(self, username: str, password: str) -> None:
        """Verify username and password"""
        pass

    @abstractmethod
    def add_user(self, user: User) -> None:
        """Register a new user"""
        pass

    @abstractmethod
    def get_user(self, username: str) -> User:
        """Find user by username"""
        pass


class ISessionRepository(ABC):
    """Session repository interface"""

    @abstractmethod
    def create(self, username: str, user_id: str) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    def lookup(self, session_id: str) -> Session:
        """Find session by ID"""
        pass

    @abstractmethod
    def destroy(self, session_id: str) -> None:
        """Remove a session"""
        pass
