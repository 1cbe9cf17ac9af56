"""wildcard - Glob-style wildcard patterns with ``?`` and ``*``."""

from __future__ import annotations

# Core
from wildcard.pattern import Pattern, match_pattern

# Collection helpers
from wildcard.patterned import (
    compute_if_absent_matching,
    compute_if_present_matching,
    compute_matching,
    contains_match,
    contains_matching_key,
    keys_matching,
    remove_matches,
    remove_matching,
    remove_matching_value,
    replace_matching,
    replace_matching_value,
    values_matching,
)

# Filtering
from wildcard.filter import FilterRule, PatternFilter

# Config
from wildcard.config import Config

# Errors
from wildcard.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    FilterRuleError,
    InvalidArgumentError,
    WildcardError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Pattern",
    "match_pattern",
    # Collection helpers
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
    # Filtering
    "FilterRule",
    "PatternFilter",
    # Config
    "Config",
    # Errors
    "ErrorCodes",
    "WildcardError",
    "InvalidArgumentError",
    "ConfigNotFoundError",
    "ConfigError",
    "FilterRuleError",
]
