from .repositories import PostRepository, UserRepository, SessionRepository

__all__ = [
    "PostRepository",
    "UserRepository",
    "SessionRepository",
]
