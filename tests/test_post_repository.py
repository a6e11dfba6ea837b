"""
Tests for the in-memory post repository.
"""
import pytest

from forum_service.domain.exceptions import (
    InvalidCategoryError,
    PostNotFoundError,
    CommentNotFoundError,
    AccessDeniedError,
    VoteNotFoundError,
    UserHasNoPostsError,
)
from forum_service.domain.models import Category, Comment, Author, UPVOTE, DOWNVOTE


def store(post_repo, post):
    post_repo.create_post(post)
    post_repo.index_post_for_author(post.author.username, post)
    return post


def comment(comment_id, user_id="author-2", username="bob"):
    return Comment(
        id=comment_id,
        body=f"comment {comment_id}",
        author=Author(username=username, id=user_id),
        created="2024-01-01T00:00:00Z",
    )


class TestCreatePost:

    @pytest.mark.parametrize("category", [c.value for c in Category])
    def test_post_visible_globally_and_in_category(self, post_repo, make_post, category):
        post = make_post(category=category)
        post_repo.create_post(post)

        assert post_repo.get_post(post.id) is post
        assert post in post_repo.list_posts_by_category(category)
        assert post in post_repo.list_all_posts()

    def test_unknown_category_has_no_side_effect(self, post_repo, make_post):
        post = make_post(category="cooking")

        with pytest.raises(InvalidCategoryError):
            post_repo.create_post(post)

        assert post_repo.list_all_posts() == []
        for category in Category:
            assert post_repo.list_posts_by_category(category.value) == []
        with pytest.raises(PostNotFoundError):
            post_repo.get_post(post.id)
        assert post.votes == []

    def test_author_upvote_recorded_on_creation(self, post_repo, make_post):
        post = make_post(author_id="author-1")
        post_repo.create_post(post)

        assert len(post.votes) == 1
        assert post.votes[0].user_id == "author-1"
        assert post.votes[0].value == UPVOTE
        assert post.score == 1
        assert post.upvote_percentage == 100

    def test_index_for_author_keeps_order(self, post_repo, make_post):
        first = store(post_repo, make_post())
        second = store(post_repo, make_post())

        assert post_repo.list_posts_by_author("alice") == [first, second]


class TestLookups:

    def test_get_missing_post(self, post_repo):
        with pytest.raises(PostNotFoundError):
            post_repo.get_post("nope")

    def test_list_unknown_category(self, post_repo):
        with pytest.raises(InvalidCategoryError):
            post_repo.list_posts_by_category("cooking")

    def test_record_view(self, post_repo, make_post):
        post = store(post_repo, make_post())
        post_repo.record_view(post)
        post_repo.record_view(post)

        assert post_repo.get_post(post.id).views == 2

    def test_author_never_posted(self, post_repo):
        with pytest.raises(UserHasNoPostsError):
            post_repo.list_posts_by_author("ghost")


class TestComments:

    def test_add_comment(self, post_repo, make_post):
        post = store(post_repo, make_post())
        post_repo.add_comment(post.id, comment("c1"))
        post_repo.add_comment(post.id, comment("c2"))

        assert [c.id for c in post.comments] == ["c1", "c2"]

    def test_add_comment_to_missing_post(self, post_repo):
        with pytest.raises(PostNotFoundError):
            post_repo.add_comment("nope", comment("c1"))

    def test_delete_comment_by_author_keeps_order(self, post_repo, make_post):
        post = store(post_repo, make_post())
        for cid in ("c1", "c2", "c3"):
            post_repo.add_comment(post.id, comment(cid))

        post_repo.delete_comment(post, "c2", "author-2")

        assert [c.id for c in post.comments] == ["c1", "c3"]

    def test_delete_comment_by_other_user(self, post_repo, make_post):
        post = store(post_repo, make_post())
        post_repo.add_comment(post.id, comment("c1"))

        with pytest.raises(AccessDeniedError):
            post_repo.delete_comment(post, "c1", "intruder")
        assert [c.id for c in post.comments] == ["c1"]

    def test_delete_missing_comment_checks_existence_first(self, post_repo, make_post):
        post = store(post_repo, make_post())

        with pytest.raises(CommentNotFoundError):
            post_repo.delete_comment(post, "c1", "intruder")

        post_repo.add_comment(post.id, comment("c1"))
        with pytest.raises(CommentNotFoundError):
            post_repo.delete_comment(post, "c9", "intruder")


class TestVotes:

    def test_repeated_vote_is_recorded_once(self, post_repo, make_post):
        post = store(post_repo, make_post())
        post_repo.apply_vote(post, "voter", UPVOTE)
        post_repo.apply_vote(post, "voter", UPVOTE)

        assert len([v for v in post.votes if v.user_id == "voter"]) == 1
        assert len(post.votes) == 2
        assert post.score == 2

    def test_alternating_votes_update_in_place(self, post_repo, make_post):
        post = store(post_repo, make_post())
        post_repo.apply_vote(post, "voter", UPVOTE)
        post_repo.apply_vote(post, "voter", DOWNVOTE)

        assert len(post.votes) == 2
        assert post.votes[1].user_id == "voter"
        assert post.votes[1].value == DOWNVOTE
        assert post.score == 0
        assert post.upvote_percentage == 0

        post_repo.apply_vote(post, "voter", UPVOTE)
        assert len(post.votes) == 2
        assert post.score == 2
        assert post.upvote_percentage == 100

    def test_score_uses_ratio_formula(self, post_repo, make_post):
        post = store(post_repo, make_post())
        post_repo.apply_vote(post, "u2", UPVOTE)
        post_repo.apply_vote(post, "u3", DOWNVOTE)

        assert post.score == 1
        assert post.upvote_percentage == 200

    def test_clear_vote_keeps_order(self, post_repo, make_post):
        post = store(post_repo, make_post())
        for user in ("u2", "u3", "u4"):
            post_repo.apply_vote(post, user, DOWNVOTE)

        post_repo.clear_vote(post, "u3")

        assert [v.user_id for v in post.votes] == ["author-1", "u2", "u4"]
        assert post.score == -1
        assert post.upvote_percentage == 50

    def test_clear_missing_vote(self, post_repo, make_post):
        post = store(post_repo, make_post())
        before = [(v.user_id, v.value) for v in post.votes]

        with pytest.raises(VoteNotFoundError):
            post_repo.clear_vote(post, "stranger")

        assert [(v.user_id, v.value) for v in post.votes] == before

    def test_clearing_every_vote_resets_score(self, post_repo, make_post):
        post = store(post_repo, make_post())
        post_repo.clear_vote(post, "author-1")

        assert post.votes == []
        assert post.score == 0
        assert post.upvote_percentage == 0


class TestDeletePost:

    def test_removed_from_every_index(self, post_repo, make_post):
        keep = store(post_repo, make_post(category="news"))
        doomed = store(post_repo, make_post(category="news"))
        last = store(post_repo, make_post(category="news"))

        post_repo.delete_post(doomed, "alice", "author-1")

        with pytest.raises(PostNotFoundError):
            post_repo.get_post(doomed.id)
        assert doomed not in post_repo.list_all_posts()
        assert doomed not in post_repo.list_posts_by_category("news")
        assert post_repo.list_posts_by_author("alice") == [keep, last]

    def test_only_author_can_delete(self, post_repo, make_post):
        post = store(post_repo, make_post())

        with pytest.raises(AccessDeniedError):
            post_repo.delete_post(post, "mallory", "intruder")

        assert post_repo.get_post(post.id) is post
        assert post_repo.list_posts_by_author("alice") == [post]

    def test_author_with_all_posts_deleted_gets_empty_list(self, post_repo, make_post):
        post = store(post_repo, make_post())
        post_repo.delete_post(post, "alice", "author-1")

        assert post_repo.list_posts_by_author("alice") == []
