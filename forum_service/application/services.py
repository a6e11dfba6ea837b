"""
Application services - Business logic layer
"""
from datetime import datetime, timezone
from typing import Optional, List, Tuple
import logging

from ..domain.models import Post, Comment, Author, User, Session, PostType, UPVOTE, DOWNVOTE
from ..domain.repositories import IPostRepository, IUserRepository, ISessionRepository
from ..domain.exceptions import SessionNotFoundError
from ..infrastructure.auth import create_access_token
from ..infrastructure.ids import generate_hex_id
from ..schemas import PostCreate

logger = logging.getLogger(__name__)


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a UTC timestamp as RFC 3339 with trimmed fractional seconds"""
    if moment is None:
        moment = datetime.now(timezone.utc)
    stamp = moment.strftime("%Y-%m-%dT%H:%M:%S")
    fraction = f"{moment.microsecond:06d}".rstrip("0")
    if fraction:
        stamp = f"{stamp}.{fraction}"
    return stamp + "Z"


def sort_by_comment_count(posts: List[Post]) -> List[Post]:
    """Order posts by ascending comment count, keeping input order on ties"""
    return sorted(posts, key=lambda post: len(post.comments))


class AuthService:
    """Authentication service - handles registration, login and sessions"""

    def __init__(
        self,
        user_repository: IUserRepository,
        session_repository: ISessionRepository
    ):
        self.user_repo = user_repository
        self.session_repo = session_repository

    def _drop_session(self, current_session_id: Optional[str]) -> None:
        if current_session_id:
            self.session_repo.destroy(current_session_id)

    def register(
        self,
        username: str,
        password: str,
        current_session_id: Optional[str] = None
    ) -> Tuple[str, Session]:
        """
        Register a new user and open a session

        The caller's current session is dropped before anything else, so it
        does not survive a failed registration.

        Returns:
            Tuple of (access_token, session)
        """
        self._drop_session(current_session_id)

        user = User(username=username, password=password, id=generate_hex_id())
        self.user_repo.add_user(user)

        token = create_access_token(user)
        session = self.session_repo.create(user.username, user.id)

        logger.info(f"User registered: id={user.id} name={user.username}")
        return token, session

    def login(
        self,
        username: str,
        password: str,
        current_session_id: Optional[str] = None
    ) -> Tuple[str, Session]:
        """
        Login with username and password

        The caller's current session is dropped even when the login fails.

        Returns:
            Tuple of (access_token, session)
        """
        self._drop_session(current_session_id)

        self.user_repo.check_credentials(username, password)
        user = self.user_repo.get_user(username)

        token = create_access_token(user)
        session = self.session_repo.create(user.username, user.id)

        logger.info(f"User login success: id={user.id} name={user.username}")
        return token, session

    def logout(self, session_id: Optional[str]) -> None:
        """Destroy the caller's session"""
        if not session_id:
            raise SessionNotFoundError()
        self.session_repo.destroy(session_id)

    def resolve_session(self, session_id: Optional[str]) -> Session:
        return self.session_repo.lookup(session_id)


class PostService:
    """Post service - handles posts, comments and votes"""

    def __init__(self, post_repository: IPostRepository):
        self.post_repo = post_repository

    def create_post(self, session: Session, data: PostCreate) -> Post:
        """
        Create a post authored by the session's user

        The post is registered globally before it is added to the author's
        list; a concurrent reader may briefly see it only in the global index.
        """
        logger.info("Adding post")
        post = Post(
            id=generate_hex_id(),
            type=data.type.value,
            title=data.title,
            category=data.category,
            author=Author(username=session.username, id=session.user_id),
            created=format_timestamp(),
        )
        if data.type == PostType.TEXT:
            post.text = data.text or ""
        else:
            post.url = data.url or ""

        self.post_repo.create_post(post)
        self.post_repo.index_post_for_author(session.username, post)

        logger.info(f"Post added: id={post.id} category={post.category}")
        return post

    def get_post(self, post_id: str) -> Post:
        """Get post by ID and count the view"""
        post = self.post_repo.get_post(post_id)
        self.post_repo.record_view(post)
        return post

    def list_posts(self) -> List[Post]:
        return sort_by_comment_count(self.post_repo.list_all_posts())

    def list_category(self, category: str) -> List[Post]:
        return sort_by_comment_count(self.post_repo.list_posts_by_category(category))

    def add_comment(self, session: Session, post_id: str, body: str) -> Post:
        """Append a comment to a post"""
        post = self.post_repo.get_post(post_id)
        comment = Comment(
            id=generate_hex_id(),
            body=body,
            author=Author(username=session.username, id=session.user_id),
            created=format_timestamp(),
        )
        self.post_repo.add_comment(post.id, comment)

        logger.info(f"Comment added: id={comment.id} post={post.id}")
        return post

    def delete_comment(self, session: Session, post_id: str, comment_id: str) -> Post:
        post = self.post_repo.get_post(post_id)
        self.post_repo.delete_comment(post, comment_id, session.user_id)

        logger.info(f"Comment deleted: id={comment_id} post={post.id}")
        return post

    def upvote(self, session: Session, post_id: str) -> Post:
        return self._vote(session, post_id, UPVOTE)

    def downvote(self, session: Session, post_id: str) -> Post:
        return self._vote(session, post_id, DOWNVOTE)

    def _vote(self, session: Session, post_id: str, value: int) -> Post:
        post = self.post_repo.get_post(post_id)
        self.post_repo.apply_vote(post, session.user_id, value)

        logger.info(f"Vote {value:+d} by {session.user_id} on post {post.id}")
        return post

    def unvote(self, session: Session, post_id: str) -> Post:
        post = self.post_repo.get_post(post_id)
        self.post_repo.clear_vote(post, session.user_id)

        logger.info(f"Vote cleared by {session.user_id} on post {post.id}")
        return post

    def delete_post(self, session: Session, post_id: str) -> None:
        post = self.post_repo.get_post(post_id)
        self.post_repo.delete_post(post, session.username, session.user_id)

        logger.info(f"Post deleted: id={post.id}")

    def list_user_posts(self, username: str) -> List[Post]:
        return self.post_repo.list_posts_by_author(username)
