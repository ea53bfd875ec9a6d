"""Inventory propagation outcome."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class PropagationResult:
    """Number of inventory rows created by one propagation run."""

    updated_count: int
