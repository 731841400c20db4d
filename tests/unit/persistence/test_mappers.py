"""Unit tests for row/domain mappers."""

from uuid import uuid4

from inkwell.domain.value import AccountId, CommentState, Email, PostStatus
from inkwell.persistence.mappers import (
    comment_to_dict,
    post_to_dict,
    row_to_comment,
    row_to_post,
)
from tests.conftest import BASE_TIME, make_comment, make_post


class TestCommentMapping:
    """Column names differ from the domain names."""

    def test_comment_to_dict_uses_column_names(self):
        comment = make_comment(uuid4(), state=CommentState.SPAM).model_copy(
            update={
                "author_email": Email("ada@example.com"),
                "submitter_id": AccountId(uuid4()),
            }
        )

        row = comment_to_dict(comment)

        assert row["status"] == "spam"
        assert row["user_id"] == comment.submitter_id
        assert row["author_email"] == "ada@example.com"
        assert "state" not in row
        assert "submitter_id" not in row

    def test_row_to_comment_accepts_string_ids(self):
        comment_id, post_id, parent_id = uuid4(), uuid4(), uuid4()
        row = {
            "id": str(comment_id),
            "post_id": str(post_id),
            "parent_id": str(parent_id),
            "author_name": "Ada",
            "author_email": None,
            "author_url": "https://ada.example.com",
            "content": "hello",
            "status": "pending",
            "user_id": None,
            "created_at": BASE_TIME,
            "updated_at": BASE_TIME,
        }

        comment = row_to_comment(row)

        assert comment.id == comment_id
        assert comment.post_id == post_id
        assert comment.parent_id == parent_id
        assert comment.state == CommentState.PENDING
        assert comment.author_email is None
        assert comment.submitter_id is None


class TestPostMapping:
    def test_post_to_dict_and_back(self):
        post = make_post("Notes on Hosting", status=PostStatus.ARCHIVED)

        restored = row_to_post(post_to_dict(post))

        assert restored == post
        assert post_to_dict(post)["slug"] == "notes-on-hosting"
