"""Secret hashing protocol.

One-way, salted hashing for secrets the service must later recognise but
never recover: user passwords and issued refresh tokens.
"""

from typing import Protocol


class SecretHashingProtocol(Protocol):
    """Hash and verify secrets.

    Both methods are synchronous and CPU-bound; async callers run them in a
    worker thread.
    """

    def hash_secret(self, secret: str) -> str:
        """Hash a plaintext secret.

        Args:
            secret: Plaintext value.

        Returns:
            Encoded hash including its salt. Two calls with the same input
            return different hashes.
        """
        ...

    def verify_secret(self, secret: str, secret_hash: str) -> bool:
        """Check a plaintext secret against a stored hash.

        Returns:
            True on match. False on mismatch or malformed hash, never raises.
        """
        ...
