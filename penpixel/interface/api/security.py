"""Request authentication helpers for routes."""

from fastapi import HTTPException, status

from penpixel.domain.service import JWTService


def require_user_id(
    jwt_service: JWTService, authorization: str | None, action: str
) -> str:
    """Resolve the authenticated user from an ``Authorization`` header.

    Args:
        jwt_service: JWT service for token verification
        authorization: Raw header value
        action: What the caller is trying to do, for the error message

    Returns:
        User ID from the token

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid
    """
    user_id = jwt_service.get_user_id_from_header(authorization)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id
