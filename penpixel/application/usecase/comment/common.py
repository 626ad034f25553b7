"""Comment response items."""

from datetime import datetime

from pydantic import BaseModel

from penpixel.application.usecase.common import AuthorSummary
from penpixel.domain.model import Comment


class CommentItem(BaseModel):
    """Comment as shown under a blog."""

    comment_id: str
    blog_id: str  # Public slug of the blog
    text: str
    parent_id: str | None
    children: list[str]
    is_reply: bool
    created_at: datetime
    commented_by: AuthorSummary | None

    @classmethod
    def from_comment(
        cls, comment: Comment, blog_slug: str, author: AuthorSummary | None
    ) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            blog_id=blog_slug,
            text=comment.text,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            children=[str(c) for c in comment.children],
            is_reply=comment.is_reply,
            created_at=comment.created_at,
            commented_by=author,
        )
