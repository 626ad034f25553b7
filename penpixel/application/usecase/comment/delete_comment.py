"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from penpixel.application.usecase.base import BaseUseCase, parse_uuid
from penpixel.domain.service import CommentService
from penpixel.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str  # From authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response.

    complete is False when part of the cascade failed; the comment itself
    is gone either way.
    """

    status: str
    deleted: list[str]
    complete: bool


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment and all of its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is neither the commenter nor the
                blog author
        """
        result = await self.comment_service.delete_comment(
            CommentId(parse_uuid(request.comment_id, "Comment")),
            UserId(parse_uuid(request.user_id, "User")),
        )
        if not result.complete:
            logfire.warn(
                "Comment deleted with cascade failures",
                comment_id=request.comment_id,
                failures=[str(f) for f in result.failures],
            )
        return DeleteCommentResponse(
            status="Done",
            deleted=[str(c) for c in result.deleted],
            complete=result.complete,
        )
