"""Comment entity.

Comments hang off a blog. A root comment has no parent; a reply points at
the comment it answers and is listed in that comment's ``children``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from penpixel.domain.model.common import DomainModel
from penpixel.domain.value import BlogId, CommentId, UserId


class Comment(DomainModel):
    """Comment entity.

    Tree structure:
    - parent_id: Comment this one replies to (None for root comments)
    - children: Ids of the replies, in insertion order
    - is_reply: True iff parent_id is set
    """

    id: CommentId
    blog_id: BlogId
    blog_author_id: UserId  # Copied from the blog, used for delete authorization
    author_id: UserId
    text: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    children: list[CommentId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_reply(self) -> bool:
        """Whether this comment answers another comment."""
        return self.parent_id is not None

    @property
    def is_root(self) -> bool:
        """Whether this comment is attached directly to the blog."""
        return self.parent_id is None
