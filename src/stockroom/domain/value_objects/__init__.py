"""Domain value objects (immutable, no identity)."""

from stockroom.domain.value_objects.propagation import PropagationResult
from stockroom.domain.value_objects.tokens import TokenPair, TokenPayload

__all__ = [
    "PropagationResult",
    "TokenPair",
    "TokenPayload",
]
