"""Unit tests for BcryptHasher.

Tests cover:
- Hash format and salting
- Verification of matching and non-matching secrets
- Secrets longer than bcrypt's 72-byte input limit
- Malformed stored hashes
- Cost factor bounds
"""

import pytest

from stockroom.infrastructure.security import BcryptHasher


@pytest.mark.unit
class TestBcryptHasher:
    """Test hashing and verification."""

    def setup_method(self):
        self.hasher = BcryptHasher(cost_factor=4)

    def test_hash_has_bcrypt_format(self):
        secret_hash = self.hasher.hash_secret("SecurePass123!")

        assert secret_hash.startswith("$2b$04$")
        assert len(secret_hash) == 60

    def test_same_secret_hashes_differently(self):
        assert self.hasher.hash_secret("same") != self.hasher.hash_secret("same")

    def test_verify_matching_secret(self):
        secret_hash = self.hasher.hash_secret("SecurePass123!")

        assert self.hasher.verify_secret("SecurePass123!", secret_hash) is True

    def test_verify_wrong_secret(self):
        secret_hash = self.hasher.hash_secret("SecurePass123!")

        assert self.hasher.verify_secret("WrongPass123!", secret_hash) is False

    def test_long_secrets_differing_after_72_bytes_do_not_collide(self):
        prefix = "x" * 100
        secret_hash = self.hasher.hash_secret(prefix + "a")

        assert self.hasher.verify_secret(prefix + "a", secret_hash) is True
        assert self.hasher.verify_secret(prefix + "b", secret_hash) is False

    @pytest.mark.parametrize("bad_hash", ["", "not-a-bcrypt-hash", "$2b$04$short"])
    def test_malformed_hash_returns_false(self, bad_hash):
        assert self.hasher.verify_secret("anything", bad_hash) is False

    @pytest.mark.parametrize("cost_factor", [3, 32])
    def test_cost_factor_out_of_range_raises(self, cost_factor):
        with pytest.raises(ValueError, match="between 4 and 31"):
            BcryptHasher(cost_factor=cost_factor)
