"""
Domain errors raised by the stores
"""
from typing import Optional


class ForumError(Exception):
    """Base class for every error the stores raise"""

    message = "forum error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class InvalidCategoryError(ForumError):
    message = "wrong category"


class PostNotFoundError(ForumError):
    message = "post not found"


class CommentNotFoundError(ForumError):
    message = "comment not found"


class AccessDeniedError(ForumError):
    message = "access denied"


class VoteNotFoundError(ForumError):
    message = "vote not found"


class UserHasNoPostsError(ForumError):
    message = "user has no posts"


class UserNotFoundError(ForumError):
    message = "user not found"


class InvalidPasswordError(ForumError):
    message = "invalid password"


class UserAlreadyExistsError(ForumError):
    message = "already exists"

    def __init__(self, username: str):
        super().__init__()
        self.username = username


class SessionNotFoundError(ForumError):
    message = "session not found"


class EntropySourceError(ForumError):
    """Raised when the OS random source cannot produce an identifier"""
    message = "entropy source failure"
