"""
FastAPI dependencies
"""
from fastapi import Depends, Request
from typing import Optional

from ..config import settings
from ..domain.models import Session
from ..infrastructure.memory import PostRepository, UserRepository, SessionRepository
from ..application.services import AuthService, PostService


# Process-lifetime stores
post_repository = PostRepository()
user_repository = UserRepository()
session_repository = SessionRepository()


async def get_post_repository() -> PostRepository:
    """Get post repository dependency"""
    return post_repository


async def get_user_repository() -> UserRepository:
    """Get user repository dependency"""
    return user_repository


async def get_session_repository() -> SessionRepository:
    """Get session repository dependency"""
    return session_repository


async def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repository),
    session_repo: SessionRepository = Depends(get_session_repository)
) -> AuthService:
    """Get auth service dependency"""
    return AuthService(user_repo, session_repo)


async def get_post_service(
    post_repo: PostRepository = Depends(get_post_repository)
) -> PostService:
    """Get post service dependency"""
    return PostService(post_repo)


async def get_session_id(request: Request) -> Optional[str]:
    """Session ID from the client's cookie, if any"""
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


async def get_current_session(
    session_id: Optional[str] = Depends(get_session_id),
    auth_service: AuthService = Depends(get_auth_service)
) -> Session:
    """
    Get the caller's session from the session cookie

    Raises:
        SessionNotFoundError: If the cookie is missing or the session unknown
    """
    return auth_service.resolve_session(session_id)
