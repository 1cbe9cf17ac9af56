"""Compiled wildcard patterns."""

from __future__ import annotations

from dataclasses import dataclass, field

from wildcard.errors import InvalidArgumentError
from wildcard.utils.matching import Element, compile_sequence, match_sequence

__all__ = ["Pattern", "match_pattern"]


@dataclass(frozen=True)
class Pattern:
    """A wildcard pattern to test candidate strings against.

    ``?`` matches exactly one character and ``*`` matches any run of
    characters, including none. Every other character is a literal. Matching
    always covers the whole candidate. Patterns are case-insensitive unless
    ``case_sensitive`` is set.

    Instances are immutable and can be shared between threads freely.
    """

    pattern: str
    case_sensitive: bool = False
    _sequence: tuple[Element, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.pattern is None:
            raise InvalidArgumentError(message="Pattern string must not be None")
        if not isinstance(self.pattern, str):
            raise InvalidArgumentError(
                message=f"Pattern must be a string, got {type(self.pattern).__name__}",
                details={"type": type(self.pattern).__name__},
            )
        object.__setattr__(
            self, "_sequence", compile_sequence(self.pattern, self.case_sensitive)
        )

    @property
    def sequence(self) -> tuple[Element, ...]:
        """The normalized, END-terminated pattern characters."""
        return self._sequence

    def matches(self, candidate: str | None) -> bool:
        """Check whether ``candidate`` matches this pattern in full.

        Args:
            candidate: The string to test. ``None`` never matches.

        Returns:
            True if the candidate matches, False otherwise.
        """
        if not isinstance(candidate, str):
            return False
        return match_sequence(
            self._sequence, compile_sequence(candidate, self.case_sensitive)
        )

    def __str__(self) -> str:
        return self.pattern


def match_pattern(
    pattern: str, candidate: str | None, case_sensitive: bool = False
) -> bool:
    """Match a single candidate against a raw wildcard pattern.

    Convenience wrapper for one-off checks; build a :class:`Pattern` once when
    testing many candidates.
    """
    return Pattern(pattern, case_sensitive=case_sensitive).matches(candidate)
