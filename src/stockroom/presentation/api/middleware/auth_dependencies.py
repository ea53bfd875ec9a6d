"""JWT authentication dependencies.

Use ``get_current_user`` to protect routes that require an access token.

Usage:
    @router.get("/protected")
    async def protected_route(
        current_user: CurrentUser = Depends(get_current_user),
    ):
        return {"user_id": current_user.user_id}
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from stockroom.core.container import get_token_service
from stockroom.core.enums import ErrorCode
from stockroom.core.result import Failure, Success
from stockroom.domain.protocols import TokenServiceProtocol

# auto_error=False so a missing header gets our error body, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)

_WWW_AUTHENTICATE = {"WWW-Authenticate": "Bearer"}


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated caller, taken from a verified access token.

    Attributes:
        user_id: User's identifier (``sub`` claim).
        session_id: Session the token belongs to (``jti`` claim).
    """

    user_id: int
    session_id: str


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenServiceProtocol, Depends(get_token_service)],
) -> CurrentUser:
    """Get current authenticated user from the Bearer access token.

    Raises:
        HTTPException 401: ``UNAUTHORIZED`` when the header is missing or not
            a Bearer credential, otherwise the code from token verification
            (``INVALID_TOKEN`` or ``TOKEN_EXPIRED``).
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "code": ErrorCode.UNAUTHORIZED.value,
                "message": "Missing or malformed Authorization header",
            },
            headers=_WWW_AUTHENTICATE,
        )

    match token_service.verify_access_token(credentials.credentials):
        case Success(value=payload):
            return CurrentUser(user_id=payload.user_id, session_id=payload.session_id)
        case Failure(error=error):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail={"code": error.code.value, "message": error.message},
                headers=_WWW_AUTHENTICATE,
            )
