#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the HTML generator.

This module defines the frozen options dataclass consumed by
:class:`html_simple.generator.Generator` and the policy engine.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from html_simple.constants import (
    ATTRIBUTE_NAME_PATTERN,
    DEFAULT_BLOCKED_URL_SCHEMES,
    DEFAULT_FALLBACK_PREFIX,
    DEFAULT_PASSTHROUGH_PREFIXES,
    DEFAULT_STRICT_MODE,
    DEFAULT_URL_FALLBACK,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class GeneratorOptions(CloneFrozenMixin):
    """Configuration options for building and sanitizing HTML.

    Parameters
    ----------
    strict : bool, default False
        Raise on builder misuse (children or text on a void element, empty
        attribute names) instead of logging a warning and ignoring the call.
    url_fallback : str, default "#"
        Value substituted for unparseable or rejected URL attribute values.
    blocked_url_schemes : frozenset[str], default {"javascript"}
        URL schemes that are always rejected.
    passthrough_prefixes : tuple[str, ...], default ("js-", "data-")
        Prefixes of unknown attribute names that are kept under their own name.
    fallback_prefix : str, default "data-"
        Prefix prepended to unknown attribute names without a pass-through prefix.

    """

    strict: bool = field(
        default=DEFAULT_STRICT_MODE,
        metadata={
            "help": "Raise on builder misuse instead of logging a warning and ignoring the call",
            "importance": "advanced",
        },
    )
    url_fallback: str = field(
        default=DEFAULT_URL_FALLBACK,
        metadata={"help": "Replacement value for rejected URL attribute values", "importance": "security"},
    )
    blocked_url_schemes: frozenset[str] = field(
        default=DEFAULT_BLOCKED_URL_SCHEMES,
        metadata={"help": "URL schemes that are always rejected", "importance": "security"},
    )
    passthrough_prefixes: tuple[str, ...] = field(
        default=DEFAULT_PASSTHROUGH_PREFIXES,
        metadata={"help": "Unknown attribute prefixes kept under their own name", "importance": "security"},
    )
    fallback_prefix: str = field(
        default=DEFAULT_FALLBACK_PREFIX,
        metadata={"help": "Prefix used to demote unknown attribute names", "importance": "security"},
    )

    def __post_init__(self) -> None:
        """Normalize collections and validate field values.

        Raises
        ------
        ValueError
            If any field value is invalid.

        """
        # Accept lists/sets from user code, normalize for internal use
        if not isinstance(self.blocked_url_schemes, frozenset):
            object.__setattr__(self, "blocked_url_schemes", frozenset(self.blocked_url_schemes))
        object.__setattr__(
            self, "blocked_url_schemes", frozenset(scheme.lower() for scheme in self.blocked_url_schemes)
        )
        if not isinstance(self.passthrough_prefixes, tuple):
            object.__setattr__(self, "passthrough_prefixes", tuple(self.passthrough_prefixes))

        if not self.fallback_prefix:
            raise ValueError("fallback_prefix must be a non-empty string")
        if not ATTRIBUTE_NAME_PATTERN.fullmatch(self.fallback_prefix):
            raise ValueError(f"fallback_prefix must be a valid attribute name prefix, got {self.fallback_prefix!r}")
        if any(not prefix for prefix in self.passthrough_prefixes):
            raise ValueError(f"passthrough_prefixes must not contain empty strings, got {self.passthrough_prefixes}")
        if any(c in self.url_fallback for c in "<>\"'&"):
            raise ValueError(f"url_fallback must not contain HTML special characters, got {self.url_fallback!r}")
