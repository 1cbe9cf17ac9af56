"""Ordered include/exclude filtering with wildcard patterns.

This module defines the FilterRule dataclass and the PatternFilter class,
which decides whether candidate strings pass a first-match-wins list of
pattern rules.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Iterable, Literal

from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError

from wildcard.config import Config
from wildcard.errors import FilterRuleError
from wildcard.pattern import Pattern

__all__ = ["FilterRule", "PatternFilter"]

_EFFECTS = ("include", "exclude")


@dataclass
class FilterRule:
    """A single filter rule.

    A rule applies to a candidate when any of its patterns matches it.
    """

    patterns: list[str]
    effect: str
    description: str = ""


@dataclass(frozen=True)
class _CompiledRule:
    """A private copy of a rule with its patterns compiled for one filter."""

    rule: FilterRule
    patterns: tuple[Pattern, ...]


class _RuleDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    patterns: list[str]
    effect: Literal["include", "exclude"]
    description: str = ""


class _FilterDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    rules: list[_RuleDocument]
    default_effect: Literal["include", "exclude"] = "exclude"
    case_sensitive: bool = False


class PatternFilter:
    """Filter with pattern-based rules and first-match-wins evaluation.

    Thread safety:
        Internally synchronized. All public methods (check, apply, add_rule,
        remove_rule, reload) are safe to call concurrently.
    """

    def __init__(
        self,
        rules: list[FilterRule],
        default_effect: str = "exclude",
        case_sensitive: bool = False,
    ) -> None:
        """Initialize the filter with ordered rules and a default effect.

        Args:
            rules: Ordered list of rules (first match wins).
            default_effect: Effect when no rule matches ('include' or 'exclude').
            case_sensitive: Whether rule patterns match case-sensitively.

        Raises:
            FilterRuleError: If an effect is not 'include' or 'exclude'.
        """
        _check_effect(default_effect, "default_effect")
        self._case_sensitive = case_sensitive
        self._rules: list[_CompiledRule] = [
            _compile_rule(rule, case_sensitive) for rule in rules
        ]
        self._default_effect: str = default_effect
        self._yaml_path: str | None = None
        self._logger: logging.Logger = logging.getLogger("wildcard.filter")
        self._lock = threading.Lock()

    @property
    def case_sensitive(self) -> bool:
        with self._lock:
            return self._case_sensitive

    @property
    def rules(self) -> list[FilterRule]:
        """Copies of the current rules, highest priority first."""
        with self._lock:
            compiled = list(self._rules)
        return [_copy_rule(c.rule) for c in compiled]

    @classmethod
    def load(cls, yaml_path: str | Path) -> PatternFilter:
        """Load a filter from a YAML file.

        The document holds ``rules`` and optionally ``default_effect`` and
        ``case_sensitive`` at the top level.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the file is not a YAML mapping.
            FilterRuleError: If the rules are structurally invalid.
        """
        config = Config.load(yaml_path)
        pattern_filter = cls._from_document(config.to_dict(), str(yaml_path))
        pattern_filter._yaml_path = str(yaml_path)
        return pattern_filter

    @classmethod
    def from_config(cls, config: Config, section: str = "filter") -> PatternFilter:
        """Build a filter from a section of a :class:`Config`.

        Raises:
            FilterRuleError: If the section is missing or invalid.
        """
        data = config.get(section)
        if data is None:
            raise FilterRuleError(f"Configuration has no '{section}' section")
        return cls._from_document(data, section)

    @classmethod
    def _from_document(cls, data: Any, source: str) -> PatternFilter:
        try:
            document = _FilterDocument.model_validate(data)
        except PydanticValidationError as e:
            raise FilterRuleError(
                f"Invalid filter rules in {source}",
                details={"errors": e.errors(include_url=False)},
                cause=e,
            ) from e

        rules = [
            FilterRule(
                patterns=list(rule.patterns),
                effect=rule.effect,
                description=rule.description,
            )
            for rule in document.rules
        ]
        return cls(
            rules=rules,
            default_effect=document.default_effect,
            case_sensitive=document.case_sensitive,
        )

    def check(self, candidate: str | None) -> bool:
        """Check whether a candidate passes the filter.

        Args:
            candidate: The string to test. ``None`` never passes.

        Returns:
            True if the candidate is included, False if excluded.
        """
        if candidate is None:
            return False

        with self._lock:
            rules = list(self._rules)
            default_effect = self._default_effect

        for compiled in rules:
            rule = compiled.rule
            if any(p.matches(candidate) for p in compiled.patterns):
                decision = rule.effect == "include"
                self._logger.debug(
                    "Filter check: candidate=%s decision=%s rule=%s",
                    candidate,
                    rule.effect,
                    rule.description or "(no description)",
                )
                return decision

        self._logger.debug(
            "Filter check: candidate=%s decision=%s rule=default",
            candidate,
            default_effect,
        )
        return default_effect == "include"

    def apply(self, candidates: Iterable[str]) -> list[str]:
        """Return the candidates that pass the filter, preserving order."""
        return [c for c in candidates if self.check(c)]

    def add_rule(self, rule: FilterRule) -> None:
        """Add a rule at position 0 (highest priority).

        Raises:
            FilterRuleError: If the rule's effect is invalid.
        """
        with self._lock:
            self._rules.insert(0, _compile_rule(rule, self._case_sensitive))

    def remove_rule(self, patterns: list[str]) -> bool:
        """Remove the first rule with exactly the given patterns.

        Returns:
            True if a rule was found and removed, False otherwise.
        """
        with self._lock:
            for i, compiled in enumerate(self._rules):
                if compiled.rule.patterns == patterns:
                    self._rules.pop(i)
                    return True
            return False

    def reload(self) -> None:
        """Re-read the rules from the original YAML file.

        Only works if the filter was created via PatternFilter.load().
        Raises FilterRuleError if no YAML path was stored.
        """
        with self._lock:
            yaml_path = self._yaml_path
        if yaml_path is None:
            raise FilterRuleError("Cannot reload: filter was not loaded from a YAML file")
        reloaded = PatternFilter.load(yaml_path)
        with self._lock:
            self._rules = reloaded._rules
            self._default_effect = reloaded._default_effect
            self._case_sensitive = reloaded._case_sensitive


def _copy_rule(rule: FilterRule) -> FilterRule:
    return replace(rule, patterns=list(rule.patterns))


def _compile_rule(rule: FilterRule, case_sensitive: bool) -> _CompiledRule:
    _check_effect(rule.effect, "effect")
    owned = _copy_rule(rule)
    return _CompiledRule(
        rule=owned,
        patterns=tuple(Pattern(p, case_sensitive=case_sensitive) for p in owned.patterns),
    )


def _check_effect(effect: str, name: str) -> None:
    if effect not in _EFFECTS:
        raise FilterRuleError(
            f"Invalid {name} '{effect}', must be 'include' or 'exclude'",
            details={name: effect},
        )
