"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - BookId wraps a positive int assigned by the database, never by application code
    - Book is immutable; updates produce a new value via dataclasses.replace
    - URL operations encoded as an Enum, no raw string matching

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

BookId = NewType("BookId", int)

# Largest identifier the relational backends accept (signed 64-bit).
MAX_BOOK_ID: int = 2**63 - 1


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True)
class Book:
    """A book record. id == 0 means "not yet persisted"."""
    title: str
    author: str
    year: int
    id: int = 0


# ─── Enums ───────────────────────────────────────────────────────

class UrlOperation(str, Enum):
    """Normalization modes accepted by POST /process-url."""
    CANONICAL = "canonical"
    REDIRECTION = "redirection"
    ALL = "all"

    @classmethod
    def names(cls) -> str:
        return ", ".join(op.value for op in cls)
