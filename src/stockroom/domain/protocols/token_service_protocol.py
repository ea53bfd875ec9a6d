"""Token service protocol.

Session lifecycle: issue creates an Active session, rotation replaces its
refresh token while keeping the session id, invalidation revokes it, and the
store TTL expires it.
"""

from typing import Protocol

from stockroom.core.errors import DomainError
from stockroom.core.result import Result
from stockroom.domain.value_objects import TokenPair, TokenPayload


class TokenServiceProtocol(Protocol):
    """Issue, verify, rotate and revoke access/refresh token pairs."""

    async def generate_token_pair(
        self, user_id: int, session_id: str | None = None
    ) -> Result[TokenPair, DomainError]:
        """Issue a pair for ``user_id``, reusing ``session_id`` when given."""
        ...

    def verify_access_token(self, token: str) -> Result[TokenPayload, DomainError]:
        """Stateless check of signature and expiry."""
        ...

    async def verify_refresh_token(
        self, token: str
    ) -> Result[TokenPayload, DomainError]:
        """Signature, expiry, then the stored hash for the session."""
        ...

    async def invalidate_refresh_token(
        self, token: str
    ) -> Result[None, DomainError]:
        """Delete the session entry named by the token's claims."""
        ...

    async def rotate_refresh_token(self, token: str) -> Result[TokenPair, DomainError]:
        """Verify, invalidate, then issue a new pair for the same session."""
        ...
