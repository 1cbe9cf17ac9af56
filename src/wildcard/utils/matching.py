"""Wildcard matching over end-terminated character sequences.

A compiled sequence is a tuple of single characters followed by :data:`END`.
The scanner only ever compares elements, so reaching the end of either side is
detected by the same comparison that checks characters.

Supported wildcards:

* ``?`` matches exactly one character.
* ``*`` matches zero or more characters; a run of ``*`` acts as one.
"""

from __future__ import annotations

from typing import Sequence, Union

__all__ = ["END", "Element", "compile_sequence", "match_sequence"]


class _End:
    """Terminator for compiled sequences. Equal only to itself."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "END"

    def __reduce__(self) -> str:
        return "END"


END = _End()

Element = Union[str, _End]


def compile_sequence(text: str, case_sensitive: bool) -> tuple[Element, ...]:
    """Normalize ``text`` into a terminated character sequence.

    Args:
        text: The raw pattern or candidate string.
        case_sensitive: When False the text is lowercased first.

    Returns:
        A tuple of the characters of ``text`` followed by :data:`END`.
    """
    if not case_sensitive:
        text = text.lower()
    return (*text, END)


def match_sequence(wild: Sequence[Element], tame: Sequence[Element]) -> bool:
    """Decide whether the whole ``tame`` sequence matches the ``wild`` pattern.

    Both arguments must come from :func:`compile_sequence` with the same
    case policy. The scan keeps a single fallback pair (the pattern and
    candidate positions right after the most recent ``*``) and rewinds to it
    when a later literal fails, so no backtracking stack is needed.

    Args:
        wild: The compiled pattern.
        tame: The compiled candidate.

    Returns:
        True if the candidate matches the pattern in full.
    """
    i_wild = 0

    # Literal scan up to the first '*'; both cursors move together here.
    while True:
        if tame[i_wild] is END:
            if wild[i_wild] is END:
                return True
            while wild[i_wild] == "*":
                i_wild += 1
                if wild[i_wild] is END:
                    return True  # "ab*" matches "ab"
            return False

        if wild[i_wild] == "*":
            i_tame = i_wild
            i_wild += 1
            while wild[i_wild] == "*":
                i_wild += 1
            if wild[i_wild] is END:
                return True

            if wild[i_wild] != "?":
                while wild[i_wild] != tame[i_tame]:
                    i_tame += 1
                    if tame[i_tame] is END:
                        return False  # "a*bc" doesn't match "ab"

            seq_wild = i_wild
            seq_tame = i_tame
            break

        if wild[i_wild] != tame[i_wild] and wild[i_wild] != "?":
            return False

        i_wild += 1

    # Wildcard-anchored loop: retry from the fallback pair on a mismatch.
    while True:
        if wild[i_wild] == "*":
            i_wild += 1
            while wild[i_wild] == "*":
                i_wild += 1
            if wild[i_wild] is END:
                return True
            if tame[i_tame] is END:
                return False

            if wild[i_wild] != "?":
                while wild[i_wild] != tame[i_tame]:
                    i_tame += 1
                    if tame[i_tame] is END:
                        return False

            seq_wild = i_wild
            seq_tame = i_tame

        elif wild[i_wild] != tame[i_tame] and wild[i_wild] != "?":
            if tame[i_tame] is END:
                return False  # "*bcd" doesn't match "abc"

            # Leading '?' after the anchor are consumed for good.
            while wild[seq_wild] == "?":
                seq_wild += 1
                seq_tame += 1

            i_wild = seq_wild
            seq_tame += 1
            while wild[i_wild] != tame[seq_tame]:
                if tame[seq_tame] is END:
                    return False
                seq_tame += 1
            i_tame = seq_tame

        if tame[i_tame] is END:
            return wild[i_wild] is END

        i_wild += 1
        i_tame += 1
