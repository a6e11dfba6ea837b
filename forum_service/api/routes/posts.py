"""
Post, comment and vote routes
"""
from fastapi import APIRouter, Depends, status
from typing import List

from ...domain.models import Session
from ...schemas import PostCreate, CommentCreate, PostResponse, MessageResponse
from ...application.services import PostService
from ..dependencies import get_post_service, get_current_session
from ..errors import validation_error


router = APIRouter(prefix="/api", tags=["Posts"])


@router.post("/posts", response_model=PostResponse, response_model_exclude_none=True,
             status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    session: Session = Depends(get_current_session),
    post_service: PostService = Depends(get_post_service)
):
    """
    Create a new post

    - **category**: One of music, funny, videos, programming, news, fashion
    - **type**: text or link
    - **title**: Post title
    - **text**: Body of a text post
    - **url**: Target of a link post
    - Requires authentication
    """
    post = post_service.create_post(session, post_data)
    return PostResponse.from_domain(post)


@router.get("/posts/", response_model=List[PostResponse], response_model_exclude_none=True)
async def list_posts(post_service: PostService = Depends(get_post_service)):
    """List all posts, fewest comments first"""
    return [PostResponse.from_domain(p) for p in post_service.list_posts()]


@router.get("/posts/{category}", response_model=List[PostResponse], response_model_exclude_none=True)
async def list_category_posts(
    category: str,
    post_service: PostService = Depends(get_post_service)
):
    """List posts in a category, fewest comments first"""
    return [PostResponse.from_domain(p) for p in post_service.list_category(category)]


@router.get("/post/{post_id}", response_model=PostResponse, response_model_exclude_none=True)
async def get_post(
    post_id: str,
    post_service: PostService = Depends(get_post_service)
):
    """Get post by ID and count the view"""
    return PostResponse.from_domain(post_service.get_post(post_id))


@router.post("/post/{post_id}", response_model=PostResponse, response_model_exclude_none=True,
             status_code=status.HTTP_201_CREATED)
async def add_comment(
    post_id: str,
    comment_data: CommentCreate,
    session: Session = Depends(get_current_session),
    post_service: PostService = Depends(get_post_service)
):
    """
    Comment on a post

    - **comment**: Comment body
    - Requires authentication
    """
    if not comment_data.comment:
        return validation_error("comment", "is required")
    post = post_service.add_comment(session, post_id, comment_data.comment)
    return PostResponse.from_domain(post)


@router.delete("/post/{post_id}/{comment_id}", response_model=PostResponse,
               response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
async def delete_comment(
    post_id: str,
    comment_id: str,
    session: Session = Depends(get_current_session),
    post_service: PostService = Depends(get_post_service)
):
    """Delete one of your own comments"""
    post = post_service.delete_comment(session, post_id, comment_id)
    return PostResponse.from_domain(post)


@router.get("/post/{post_id}/upvote", response_model=PostResponse,
            response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
async def upvote(
    post_id: str,
    session: Session = Depends(get_current_session),
    post_service: PostService = Depends(get_post_service)
):
    return PostResponse.from_domain(post_service.upvote(session, post_id))


@router.get("/post/{post_id}/downvote", response_model=PostResponse,
            response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
async def downvote(
    post_id: str,
    session: Session = Depends(get_current_session),
    post_service: PostService = Depends(get_post_service)
):
    return PostResponse.from_domain(post_service.downvote(session, post_id))


@router.get("/post/{post_id}/unvote", response_model=PostResponse,
            response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
async def unvote(
    post_id: str,
    session: Session = Depends(get_current_session),
    post_service: PostService = Depends(get_post_service)
):
    """Withdraw your vote on a post"""
    return PostResponse.from_domain(post_service.unvote(session, post_id))


@router.delete("/post/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    session: Session = Depends(get_current_session),
    post_service: PostService = Depends(get_post_service)
):
    """
    Delete post

    - Requires authentication
    - Only the author can delete
    """
    post_service.delete_post(session, post_id)
    return MessageResponse(message="success")


@router.get("/user/{username}", response_model=List[PostResponse], response_model_exclude_none=True)
async def list_user_posts(
    username: str,
    post_service: PostService = Depends(get_post_service)
):
    """List posts written by a user"""
    return [PostResponse.from_domain(p) for p in post_service.list_user_posts(username)]
