from __future__ import annotations

from typing import Optional


class LogomarkError(Exception):
    """Base class for errors surfaced by the generation core."""


class InputError(LogomarkError, ValueError):
    """A request was rejected before any hashing or geometry ran."""

    def __init__(self, message: str, *, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ExhaustedCandidates(LogomarkError):
    """Every attempt for one variation failed to produce a usable document."""

    def __init__(self, algorithm: str, variant: int, attempts: int, last_error: Optional[BaseException] = None):
        detail = f": {last_error}" if last_error is not None else ""
        super().__init__(
            f"{algorithm} variation {variant} produced no usable candidate in {attempts} attempts{detail}"
        )
        self.algorithm = algorithm
        self.variant = variant
        self.attempts = attempts
        self.last_error = last_error


__all__ = ["LogomarkError", "InputError", "ExhaustedCandidates"]
