"""
Authentication routes
"""
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from typing import Optional

from ...config import settings
from ...domain.exceptions import ForumError
from ...domain.models import Session
from ...schemas import UserCredentials, TokenResponse, MessageResponse
from ...application.services import AuthService
from ..dependencies import get_auth_service, get_session_id
from ..errors import forum_error_handler


router = APIRouter(prefix="/api", tags=["Authentication"])


def set_session_cookie(response: Response, session: Session) -> None:
    """Hand the session ID to the client with a 24 hour expiry hint"""
    max_age = settings.SESSION_COOKIE_MAX_AGE_HOURS * 3600
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session.id,
        max_age=max_age,
        expires=max_age,
        path="/"
    )


async def reject_and_clear_session(
    request: Request,
    exc: ForumError,
    session_id: Optional[str]
) -> JSONResponse:
    """Error response that also drops the session cookie the client sent"""
    error_response = await forum_error_handler(request, exc)
    if session_id:
        error_response.delete_cookie(key=settings.SESSION_COOKIE_NAME, path="/")
    return error_response


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(
    credentials: UserCredentials,
    request: Request,
    response: Response,
    session_id: Optional[str] = Depends(get_session_id),
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Register a new user

    - **username**: Unique username
    - **password**: User password
    """
    try:
        token, session = auth_service.register(
            username=credentials.username,
            password=credentials.password,
            current_session_id=session_id
        )
    except ForumError as e:
        return await reject_and_clear_session(request, e, session_id)
    set_session_cookie(response, session)
    return TokenResponse(token=token)


@router.post("/login", response_model=TokenResponse)
async def login(
    credentials: UserCredentials,
    request: Request,
    response: Response,
    session_id: Optional[str] = Depends(get_session_id),
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Login with username and password

    Any session the client already holds is dropped, even on failure.
    """
    try:
        token, session = auth_service.login(
            username=credentials.username,
            password=credentials.password,
            current_session_id=session_id
        )
    except ForumError as e:
        return await reject_and_clear_session(request, e, session_id)
    set_session_cookie(response, session)
    return TokenResponse(token=token)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    session_id: Optional[str] = Depends(get_session_id),
    auth_service: AuthService = Depends(get_auth_service)
):
    """Logout and destroy the current session"""
    auth_service.logout(session_id)
    response.delete_cookie(key=settings.SESSION_COOKIE_NAME, path="/")
    return MessageResponse(message="success")
