# apps/domain/models.py

"""
Domain Models - Value Objects and Exceptions

Value Objects: Immutable, defined by attributes (Antigen, Antibody)
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


# ============================================================
# DOMAIN EXCEPTIONS
# ============================================================

class DomainException(Exception):
    """Base exception for domain layer"""
    pass


class InvalidAntigenError(DomainException):
    """
    Raised when an antigen value is missing or outside [0, MAX)

    Carries the offending value (None when the value was absent).
    """

    def __init__(self, value: Optional[Any]):
        self.value = value
        shown = "missing" if value is None else value
        super().__init__(f"Invalid antigen value: {shown}")


# ============================================================
# VALUE OBJECTS (Immutable)
# ============================================================

@dataclass(frozen=True)
class Antigen:
    """
    A stimulus identified by an integer value

    Immutable value object. The range check against the upper bound
    happens in the lymphatic system, which owns the bound.
    """
    value: int

    def __post_init__(self):
        if self.value is None or isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidAntigenError(self.value)

    def __str__(self) -> str:
        return f"Antigen({self.value})"


@dataclass(frozen=True)
class Antibody:
    """
    The reaction to an antigen

    effort == 0 means the antibody was recalled from the store,
    effort > 0 is the number of draws it took to produce it.
    """
    antigen: Antigen
    effort: int

    def __post_init__(self):
        if self.effort < 0:
            raise ValueError(f"Antibody effort must be non-negative, got {self.effort}")

    @property
    def value(self) -> int:
        return self.antigen.value

    @property
    def recalled(self) -> bool:
        return self.effort == 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'antigen': self.antigen.value,
            'effort': self.effort,
            'recalled': self.recalled,
        }

    def __str__(self) -> str:
        if self.recalled:
            return f"Antibody[antigen={self.antigen.value}, effort=0 (recalled)]"
        return f"Antibody[antigen={self.antigen.value}, effort={self.effort}]"
