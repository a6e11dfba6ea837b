"""
Repository implementations - In-memory data access layer
"""
from typing import Dict, List

from ...domain.exceptions import (
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
)
from ...domain.models import Category, Post, Comment, Vote, User, Session, UPVOTE
from ...domain.repositories import IPostRepository, IUserRepository, ISessionRepository
from ...domain.scoring import calculate_score
from ..ids import generate_session_id
from ..locks import ReadWriteLock


class PostRepository(IPostRepository):
    """
    Post repository keeping every post in process memory

    Posts are indexed three ways: by ID, by category and by author username.
    All indexes point at the same Post objects, so callers holding a post see
    every later mutation made through the repository.
    """

    def __init__(self):
        self._posts: Dict[str, Post] = {}
        self._by_category: Dict[str, Dict[str, Post]] = {
            category.value: {} for category in Category
        }
        self._by_author: Dict[str, List[Post]] = {}
        self._lock = ReadWriteLock()

    def _recalculate(self, post: Post) -> None:
        post.score, post.upvote_percentage = calculate_score(post.votes)

    def create_post(self, post: Post) -> None:
        """
        Register a new post globally and under its category

        The author's own upvote is recorded as part of creation. No duplicate
        ID check is made; callers supply fresh IDs.

        Raises:
            InvalidCategoryError: If the category is not a known section
        """
        if post.category not in self._by_category:
            raise InvalidCategoryError()

        with self._lock.write_locked():
            if post.find_vote(post.author.id) is None:
                post.votes.append(Vote(user_id=post.author.id, value=UPVOTE))
            self._recalculate(post)
            self._posts[post.id] = post
            self._by_category[post.category][post.id] = post

    def index_post_for_author(self, username: str, post: Post) -> None:
        """Append a post to the author's list, creating the list on first use"""
        with self._lock.write_locked():
            self._by_author.setdefault(username, []).append(post)

    def get_post(self, post_id: str) -> Post:
        """Find post by ID"""
        with self._lock.read_locked():
            post = self._posts.get(post_id)
        if post is None:
            raise PostNotFoundError()
        return post

    def record_view(self, post: Post) -> None:
        with self._lock.write_locked():
            post.views += 1

    def list_all_posts(self) -> List[Post]:
        """List every stored post in no particular order"""
        with self._lock.read_locked():
            return list(self._posts.values())

    def list_posts_by_category(self, category: str) -> List[Post]:
        with self._lock.read_locked():
            posts = self._by_category.get(category)
            if posts is None:
                raise InvalidCategoryError()
            return list(posts.values())

    def add_comment(self, post_id: str, comment: Comment) -> None:
        with self._lock.write_locked():
            post = self._posts.get(post_id)
            if post is None:
                raise PostNotFoundError()
            post.comments.append(comment)

    def delete_comment(self, post: Post, comment_id: str, user_id: str) -> None:
        """
        Remove a comment from a post

        Raises:
            CommentNotFoundError: If the post has no comment with that ID
            AccessDeniedError: If the comment was written by someone else
        """
        with self._lock.write_locked():
            index = post.find_comment_index(comment_id)
            if index == -1:
                raise CommentNotFoundError()
            if not post.comments[index].is_owner(user_id):
                raise AccessDeniedError()
            del post.comments[index]

    def apply_vote(self, post: Post, user_id: str, value: int) -> None:
        """Record a user's vote, replacing any earlier vote by the same user"""
        with self._lock.write_locked():
            vote = post.find_vote(user_id)
            if vote is not None:
                vote.value = value
            else:
                post.votes.append(Vote(user_id=user_id, value=value))
            self._recalculate(post)

    def clear_vote(self, post: Post, user_id: str) -> None:
        """
        Remove a user's vote

        Raises:
            VoteNotFoundError: If the user has not voted on the post
        """
        with self._lock.write_locked():
            vote = post.find_vote(user_id)
            if vote is None:
                raise VoteNotFoundError()
            post.votes.remove(vote)
            self._recalculate(post)

    def delete_post(self, post: Post, author_username: str, user_id: str) -> None:
        """
        Remove a post from the global table, its category and its author's list

        Raises:
            AccessDeniedError: If user_id is not the post's author
        """
        if not post.is_owner(user_id):
            raise AccessDeniedError()

        with self._lock.write_locked():
            self._posts.pop(post.id, None)
            self._by_category[post.category].pop(post.id, None)

            author_posts = self._by_author.get(author_username)
            if author_posts is not None:
                self._by_author[author_username] = [
                    p for p in author_posts if p.id != post.id
                ]

    def list_posts_by_author(self, username: str) -> List[Post]:
        """
        List posts written by username in creation order

        An author whose posts were all deleted gets an empty list.

        Raises:
            UserHasNoPostsError: If username never published a post
        """
        with self._lock.read_locked():
            posts = self._by_author.get(username)
            if posts is None:
                raise UserHasNoPostsError()
            return list(posts)


class UserRepository(IUserRepository):
    """User repository keeping credentials in process memory"""

    def __init__(self):
        self._users: Dict[str, User] = {}
        self._lock = ReadWriteLock()

    def _check_credentials(self, username: str, password: str) -> None:
        user = self._users.get(username)
        if user is None:
            raise UserNotFoundError()
        if not user.check_password(password):
            raise InvalidPasswordError()

    def check_credentials(self, username: str, password: str) -> None:
        """
        Verify username and password

        Raises:
            UserNotFoundError: If username is not registered
            InvalidPasswordError: If the password does not match
        """
        with self._lock.read_locked():
            self._check_credentials(username, password)

    def add_user(self, user: User) -> None:
        """
        Register a new user

        Raises:
            UserAlreadyExistsError: If the username is already registered
        """
        with self._lock.write_locked():
            try:
                self._check_credentials(user.username, user.password)
            except UserNotFoundError:
                self._users[user.username] = user
                return
            except InvalidPasswordError:
                pass
            raise UserAlreadyExistsError(user.username)

    def get_user(self, username: str) -> User:
        with self._lock.read_locked():
            user = self._users.get(username)
        if user is None:
            raise UserNotFoundError()
        return user


class SessionRepository(ISessionRepository):
    """Session repository keeping sessions in process memory"""

    def __init__(self):
        self._sessions: Dict[str, Session] = {}
        self._lock = ReadWriteLock()

    def create(self, username: str, user_id: str) -> Session:
        """Create a session; a user may hold several at once"""
        session = Session(id=generate_session_id(), username=username, user_id=user_id)
        with self._lock.write_locked():
            self._sessions[session.id] = session
        return session

    def lookup(self, session_id: str) -> Session:
        """
        Find session by ID

        Raises:
            SessionNotFoundError: If the session is unknown
        """
        if not session_id:
            raise SessionNotFoundError()
        with self._lock.read_locked():
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError()
        return session

    def destroy(self, session_id: str) -> None:
        with self._lock.write_locked():
            self._sessions.pop(session_id, None)
