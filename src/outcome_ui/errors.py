"""Internal error types and the Ok/Err pattern for non-UI operations.

API outcomes shown to the user live in ``outcome_ui.result``; this module
covers the plumbing around them (config loading, UI wiring).
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, TypeVar, Union, Optional

T = TypeVar("T")
E = TypeVar("E")

class ErrorKind(Enum):
    CONFIG = auto()

@dataclass(frozen=True)
class AppError:
    kind: ErrorKind
    message: str
    source: Optional[str] = None

    def __str__(self) -> str:
        base = f"{self.kind.name}: {self.message}"
        return f"{base} (source: {self.source})" if self.source else base

@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

Attempt = Union[Ok[T], Err[E]]
