"""Bcrypt secret hashing (adapter).

Implements SecretHashingProtocol for both user passwords and refresh tokens.

Security:
    - Bcrypt with configurable cost factor (12 = ~250ms per hash)
    - Random salt per hash
    - Inputs are pre-hashed with SHA-256 and base64-encoded before bcrypt.
      Bcrypt only reads the first 72 bytes of its input, and a signed refresh
      token is far longer; without the pre-hash two tokens sharing a prefix
      would verify against each other.
"""

import base64
import hashlib

import bcrypt


def _prehash(secret: str) -> bytes:
    """Fixed-length (44 byte) digest of ``secret`` fed to bcrypt."""
    return base64.b64encode(hashlib.sha256(secret.encode("utf-8")).digest())


class BcryptHasher:
    """Bcrypt hashing service.

    Usage:
        hasher = BcryptHasher(cost_factor=12)
        secret_hash = hasher.hash_secret("SecurePass123!")
        hasher.verify_secret("SecurePass123!", secret_hash)  # True
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt hasher.

        Args:
            cost_factor: Bcrypt cost factor (log2 of the iteration count).
                Each +1 doubles computation time.

        Raises:
            ValueError: If cost_factor is outside bcrypt's 4..31 range.
        """
        if not 4 <= cost_factor <= 31:
            msg = "Cost factor must be between 4 and 31"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_secret(self, secret: str) -> str:
        """Hash a plaintext secret using bcrypt.

        Args:
            secret: Plaintext password or token.

        Returns:
            Hash string in bcrypt format ($2b$<cost>$...), 60 characters.
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(_prehash(secret), salt).decode("utf-8")

    def verify_secret(self, secret: str, secret_hash: str) -> bool:
        """Verify a plaintext secret against a bcrypt hash.

        Returns:
            True if the secret matches. False on mismatch or when the stored
            hash is not a valid bcrypt string.
        """
        try:
            # bcrypt.checkpw does constant-time comparison
            return bcrypt.checkpw(_prehash(secret), secret_hash.encode("utf-8"))
        except (ValueError, AttributeError):
            return False
