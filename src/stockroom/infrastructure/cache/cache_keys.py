"""Key layout for the expiring key-value store."""


class RefreshTokenKeys:
    """Builds keys for refresh-token session entries.

    Format: ``refresh_token:{user_id}:{session_id}``.
    """

    PREFIX = "refresh_token"

    @classmethod
    def session(cls, user_id: int, session_id: str) -> str:
        """Key for one user session."""
        return f"{cls.PREFIX}:{user_id}:{session_id}"
