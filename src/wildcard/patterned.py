"""Pattern-aware helpers for sets and string-keyed mappings.

Every helper takes the container and a :class:`~wildcard.pattern.Pattern` and
works by iterating, calling :meth:`Pattern.matches`, and acting on the result.
Keys to mutate are collected before any mutation, so a helper never changes a
container while iterating it. Callers remain responsible for not mutating the
same container from another thread at the same time.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Callable, Mapping, MutableMapping, MutableSet, TypeVar

from wildcard.pattern import Pattern

logger = logging.getLogger(__name__)

__all__ = [
    "contains_match",
    "remove_matches",
    "contains_matching_key",
    "keys_matching",
    "values_matching",
    "remove_matching",
    "remove_matching_value",
    "replace_matching",
    "replace_matching_value",
    "compute_matching",
    "compute_if_absent_matching",
    "compute_if_present_matching",
]

V = TypeVar("V")


# === Sets ===


def contains_match(items: AbstractSet[str], pattern: Pattern) -> bool:
    """Check whether any element of ``items`` matches ``pattern``.

    The raw pattern string is looked up directly first, so a literal hit
    avoids a full scan.
    """
    if str(pattern) in items:
        return True
    return any(pattern.matches(item) for item in items)


def remove_matches(items: MutableSet[str], pattern: Pattern) -> bool:
    """Remove elements of ``items`` that match ``pattern``.

    If the raw pattern string is itself an element, only that element is
    removed and no scan happens.

    Returns:
        True if at least one element was removed.
    """
    raw = str(pattern)
    if raw in items:
        items.discard(raw)
        return True

    matched = [item for item in items if pattern.matches(item)]
    for item in matched:
        items.discard(item)
    if matched:
        logger.debug("Removed %d set elements matching %r", len(matched), raw)
    return bool(matched)


# === Mappings ===


def contains_matching_key(mapping: Mapping[str, V], pattern: Pattern) -> bool:
    """Check whether any key of ``mapping`` matches ``pattern``."""
    return any(pattern.matches(key) for key in mapping)


def keys_matching(mapping: Mapping[str, V], pattern: Pattern) -> set[str]:
    """Return the set of keys of ``mapping`` that match ``pattern``."""
    return {key for key in mapping if pattern.matches(key)}


def values_matching(mapping: Mapping[str, V], pattern: Pattern) -> list[V]:
    """Return the values whose keys match ``pattern``, in mapping order."""
    return [value for key, value in mapping.items() if pattern.matches(key)]


def remove_matching(mapping: MutableMapping[str, V], pattern: Pattern) -> list[V]:
    """Remove every entry whose key matches ``pattern``.

    Returns:
        The removed values, in mapping order.
    """
    removed = [mapping.pop(key) for key in _matching_keys(mapping, pattern)]
    if removed:
        logger.debug("Removed %d entries matching %r", len(removed), str(pattern))
    return removed


def remove_matching_value(
    mapping: MutableMapping[str, V], pattern: Pattern, value: V | None
) -> bool:
    """Remove entries whose key matches ``pattern`` and whose value equals ``value``.

    ``None`` only matches entries mapped to ``None``.

    Returns:
        True if at least one entry was removed.
    """
    targets = [
        key
        for key in _matching_keys(mapping, pattern)
        if _same_value(mapping[key], value)
    ]
    for key in targets:
        del mapping[key]
    if targets:
        logger.debug("Removed %d entries matching %r", len(targets), str(pattern))
    return bool(targets)


def replace_matching(
    mapping: MutableMapping[str, V], pattern: Pattern, value: V
) -> list[V]:
    """Set every entry whose key matches ``pattern`` to ``value``.

    Returns:
        The previous values of the updated entries.
    """
    previous: list[V] = []
    for key in _matching_keys(mapping, pattern):
        previous.append(mapping[key])
        mapping[key] = value
    if previous:
        logger.debug("Replaced %d entries matching %r", len(previous), str(pattern))
    return previous


def replace_matching_value(
    mapping: MutableMapping[str, V],
    pattern: Pattern,
    old_value: V | None,
    new_value: V,
) -> bool:
    """Replace ``old_value`` with ``new_value`` on entries whose key matches ``pattern``.

    Returns:
        True if at least one entry was updated.
    """
    replaced = 0
    for key in _matching_keys(mapping, pattern):
        if _same_value(mapping[key], old_value):
            mapping[key] = new_value
            replaced += 1
    if replaced:
        logger.debug("Replaced %d entries matching %r", replaced, str(pattern))
    return replaced > 0


def compute_matching(
    mapping: MutableMapping[str, V],
    pattern: Pattern,
    remapping: Callable[[str, V | None], V | None],
) -> list[V | None]:
    """Recompute the value of every entry whose key matches ``pattern``.

    ``remapping`` receives the key and its current value. A ``None`` result
    removes the entry.

    Returns:
        The values returned by ``remapping``.
    """
    results: list[V | None] = []
    for key in _matching_keys(mapping, pattern):
        new_value = remapping(key, mapping[key])
        if new_value is None:
            del mapping[key]
        else:
            mapping[key] = new_value
        results.append(new_value)
    removed = results.count(None)
    _log_computed(len(results) - removed, removed, pattern)
    return results


def compute_if_absent_matching(
    mapping: MutableMapping[str, V],
    pattern: Pattern,
    factory: Callable[[str], V | None],
) -> list[V | None]:
    """Fill in matching entries that are mapped to ``None``.

    ``factory`` is called with the key of each matching entry whose value is
    ``None``; a non-``None`` result is stored. Entries that already hold a
    value are left alone.

    Returns:
        The resulting value of every matching entry.
    """
    results: list[V | None] = []
    filled = 0
    for key in _matching_keys(mapping, pattern):
        current = mapping[key]
        if current is None:
            current = factory(key)
            if current is not None:
                mapping[key] = current
                filled += 1
        results.append(current)
    if filled:
        logger.debug("Filled %d entries matching %r", filled, str(pattern))
    return results


def compute_if_present_matching(
    mapping: MutableMapping[str, V],
    pattern: Pattern,
    remapping: Callable[[str, V], V | None],
) -> list[V | None]:
    """Recompute matching entries that hold a non-``None`` value.

    A ``None`` result from ``remapping`` removes the entry.

    Returns:
        The resulting value of every matching entry (``None`` for entries
        skipped or removed).
    """
    results: list[V | None] = []
    updated = removed = 0
    for key in _matching_keys(mapping, pattern):
        current = mapping[key]
        if current is None:
            results.append(None)
            continue
        new_value = remapping(key, current)
        if new_value is None:
            del mapping[key]
            removed += 1
        else:
            mapping[key] = new_value
            updated += 1
        results.append(new_value)
    _log_computed(updated, removed, pattern)
    return results


def _log_computed(updated: int, removed: int, pattern: Pattern) -> None:
    if updated or removed:
        logger.debug(
            "Computed %d entries matching %r (%d updated, %d removed)",
            updated + removed,
            str(pattern),
            updated,
            removed,
        )


def _matching_keys(mapping: Mapping[str, V], pattern: Pattern) -> list[str]:
    return [key for key in mapping if pattern.matches(key)]


def _same_value(current: object, expected: object) -> bool:
    if expected is None:
        return current is None
    return current is not None and current == expected
