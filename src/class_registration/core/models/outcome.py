"""
Module: outcome

Purpose:
    SubmissionOutcome - the transient result of one submit attempt.

    The transport never exposes the remote response, so SUCCESS only
    means the request was dispatched without raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OutcomeKind(Enum):
    SUCCESS = "success"
    ERROR = "error"


class ErrorCategory(Enum):
    """Why an attempt failed."""
    CONNECTIVITY = "connectivity"
    GENERIC = "generic"


@dataclass(frozen=True, slots=True)
class SubmissionOutcome:
    """
    Result of a single submission attempt (immutable).

    Attributes:
        kind: SUCCESS or ERROR
        message: User-facing status text
        category: Failure classification, None for SUCCESS

    Invariants:
        - category is None iff kind is SUCCESS
    """

    kind: OutcomeKind
    message: str
    category: Optional[ErrorCategory] = None

    def __post_init__(self) -> None:
        if self.kind is OutcomeKind.SUCCESS and self.category is not None:
            raise ValueError("Successful outcome cannot carry an error category")
        if self.kind is OutcomeKind.ERROR and self.category is None:
            raise ValueError("Error outcome requires a category")

    @classmethod
    def success(cls, message: str) -> SubmissionOutcome:
        return cls(kind=OutcomeKind.SUCCESS, message=message)

    @classmethod
    def error(cls, message: str, category: ErrorCategory = ErrorCategory.GENERIC) -> SubmissionOutcome:
        return cls(kind=OutcomeKind.ERROR, message=message, category=category)

    @property
    def is_success(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.kind is OutcomeKind.ERROR
