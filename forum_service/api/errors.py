"""
Translation of domain errors into HTTP responses
"""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from typing import Optional
import logging

from ..domain.exceptions import (
    ForumError,
    InvalidCategoryError,
    PostNotFoundError,
    CommentNotFoundError,
    AccessDeniedError,
    VoteNotFoundError,
    UserHasNoPostsError,
    UserNotFoundError,
    InvalidPasswordError,
    UserAlreadyExistsError,
    SessionNotFoundError,
    EntropySourceError,
)
from ..schemas import ValidationErrorItem, ValidationErrorResponse

logger = logging.getLogger(__name__)


ERROR_STATUS = {
    InvalidCategoryError: status.HTTP_400_BAD_REQUEST,
    PostNotFoundError: status.HTTP_404_NOT_FOUND,
    CommentNotFoundError: status.HTTP_404_NOT_FOUND,
    AccessDeniedError: status.HTTP_403_FORBIDDEN,
    VoteNotFoundError: status.HTTP_400_BAD_REQUEST,
    UserHasNoPostsError: status.HTTP_404_NOT_FOUND,
    UserNotFoundError: status.HTTP_401_UNAUTHORIZED,
    InvalidPasswordError: status.HTTP_401_UNAUTHORIZED,
    UserAlreadyExistsError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    SessionNotFoundError: status.HTTP_401_UNAUTHORIZED,
    EntropySourceError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: ForumError) -> int:
    return ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)


def validation_error(param: str, msg: str, value: Optional[str] = None) -> JSONResponse:
    """Build a 422 response in the forum's validation error shape"""
    body = ValidationErrorResponse(errors=[
        ValidationErrorItem(location="body", param=param, value=value, msg=msg)
    ])
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=body.model_dump(exclude_none=True)
    )


async def forum_error_handler(request: Request, exc: ForumError) -> JSONResponse:
    """Map a domain error onto its HTTP status"""
    code = status_for(exc)
    if code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path}: {exc}")

    if isinstance(exc, UserAlreadyExistsError):
        return validation_error("username", str(exc), value=exc.username)

    return JSONResponse(status_code=code, content={"message": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ForumError, forum_error_handler)
