"""
Contracts Module - validation at the engine's edges.

This module provides:
- schema.py: Pydantic models for store records (input) and renderer payloads (output)
- invariants.py: Semantic correctness checks on computed layouts
"""

from .invariants import (
    ALL_INVARIANTS,
    InvariantViolation,
    enforce_invariants,
    enforce_invariants_strict,
)
from .schema import (
    BlockLayoutContract,
    BlockProgressContract,
    EntryRecord,
    LayoutBoxContract,
    LayoutWarningContract,
    parse_entries,
)

__all__ = [
    # Schema
    "EntryRecord",
    "parse_entries",
    "LayoutBoxContract",
    "LayoutWarningContract",
    "BlockLayoutContract",
    "BlockProgressContract",
    # Invariants
    "ALL_INVARIANTS",
    "InvariantViolation",
    "enforce_invariants",
    "enforce_invariants_strict",
]
