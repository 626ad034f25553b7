"""Base service class for domain services."""

from typing import Any, Awaitable

import logfire

from penpixel.domain.error import SecondaryEffectError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    async def best_effort(
        self, effect: str, subject_id: object, operation: Awaitable[Any]
    ) -> SecondaryEffectError | None:
        """Await a secondary effect, logging instead of raising on failure.

        Args:
            effect: Short name of the effect (e.g. "adjust_likes")
            subject_id: Entity the effect was applied for
            operation: Awaitable performing the effect

        Returns:
            The failure, or None if the effect succeeded
        """
        try:
            await operation
        except Exception as e:
            failure = SecondaryEffectError(effect, str(subject_id), e)
            logfire.error(
                "Secondary effect failed",
                effect=effect,
                subject_id=str(subject_id),
                error=str(e),
                error_type=type(e).__name__,
            )
            return failure
        return None
