"""
Pytest configuration and fixtures for the forum service.
"""
import pytest
from fastapi.testclient import TestClient

from forum_service.api import dependencies
from forum_service.domain.models import Post, Author
from forum_service.infrastructure.memory import PostRepository, UserRepository, SessionRepository
from forum_service.main import create_app


@pytest.fixture
def post_repo():
    return PostRepository()


@pytest.fixture
def user_repo():
    return UserRepository()


@pytest.fixture
def session_repo():
    return SessionRepository()


@pytest.fixture
def make_post():
    """Factory for unsaved posts."""
    counter = {"n": 0}

    def _make(category="music", author_id="author-1", username="alice", post_type="text"):
        counter["n"] += 1
        return Post(
            id=f"post-{counter['n']}",
            type=post_type,
            title=f"Post {counter['n']}",
            category=category,
            author=Author(username=username, id=author_id),
            created="2024-01-01T00:00:00Z",
            text="hello" if post_type == "text" else "",
            url="https://example.com" if post_type == "link" else "",
        )

    return _make


@pytest.fixture
def app(post_repo, user_repo, session_repo):
    """Application wired to fresh stores."""
    application = create_app()
    application.dependency_overrides[dependencies.get_post_repository] = lambda: post_repo
    application.dependency_overrides[dependencies.get_user_repository] = lambda: user_repo
    application.dependency_overrides[dependencies.get_session_repository] = lambda: session_repo
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def other_client(app):
    """Second browser with its own cookie jar."""
    with TestClient(app) as test_client:
        yield test_client
