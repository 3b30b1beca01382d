#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html_simple/policy.py
"""Attribute policy table and attribute assignment rules.

Every attribute assigned through the builder is resolved against a
:class:`PolicyTable`. A policy is a declarative record naming whether the
attribute is allowed, which sanitizer to run on its value, and how repeated
assignments accumulate:

- ``REPLACE``: the last assignment wins
- ``APPEND_SPACE_SEPARATED``: whitespace separated tokens accumulate (``class``)
- ``APPEND_SEMICOLON_SEPARATED``: declarations accumulate (``style``)

Attribute names not present in the table (or present but denied) are kept
under their own name when they carry a pass-through prefix (``js-``,
``data-``) and are otherwise demoted to ``data-<name>``, which turns event
handlers such as ``onclick`` into inert data attributes.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Union

from html_simple.constants import (
    ATTRIBUTE_NAME_PATTERN,
    CLASS_ATTRIBUTE,
    DEFAULT_ALLOWED_ATTRIBUTES,
    DEFAULT_URL_ATTRIBUTES,
    HTMX_URL_ATTRIBUTES,
    STYLE_ATTRIBUTE,
)
from html_simple.escape import escape_text
from html_simple.exceptions import ValidationError
from html_simple.options import GeneratorOptions
from html_simple.security import sanitize_url

logger = logging.getLogger(__name__)

# A trailing character entity such as "&#x27;" or "&quot;"
_ENTITY_TAIL = re.compile(r"&#?[0-9A-Za-z]+;$")


class AccumulationMode(Enum):
    """How repeated assignments to one attribute combine."""

    REPLACE = "replace"
    APPEND_SPACE_SEPARATED = "space"
    APPEND_SEMICOLON_SEPARATED = "semicolon"


class SanitizerKind(Enum):
    """Sanitizer applied to an attribute value."""

    ESCAPE = "escape"
    URL = "url"


def apply_sanitizer(kind: SanitizerKind, value: str, options: GeneratorOptions | None = None) -> str:
    """Run the sanitizer selected by ``kind`` on ``value``.

    Parameters
    ----------
    kind : SanitizerKind
        Sanitizer to run
    value : str
        Raw attribute value
    options : GeneratorOptions, optional
        Options supplying the URL fallback and blocked schemes

    Returns
    -------
    str
        Sanitized value

    """
    options = options or GeneratorOptions()
    if kind is SanitizerKind.URL:
        return sanitize_url(value, fallback=options.url_fallback, blocked_schemes=options.blocked_url_schemes)
    return escape_text(value)


@dataclass(frozen=True)
class AttributePolicy:
    """Policy for a single attribute name.

    Parameters
    ----------
    name : str
        Attribute name (case-sensitive)
    allowed : bool, default True
        Whether the attribute is emitted under its own name
    mode : AccumulationMode, default REPLACE
        Accumulation mode for repeated assignments
    sanitizer : SanitizerKind, default ESCAPE
        Sanitizer run on every assigned value

    """

    name: str
    allowed: bool = True
    mode: AccumulationMode = AccumulationMode.REPLACE
    sanitizer: SanitizerKind = SanitizerKind.ESCAPE

    def sanitize(self, value: str, options: GeneratorOptions | None = None) -> str:
        """Sanitize ``value`` with this policy's sanitizer."""
        return apply_sanitizer(self.sanitizer, value, options)


@dataclass(frozen=True)
class CustomAttribute:
    """A caller-supplied attribute name allowed with escape-only sanitization."""

    name: str


CustomAttributeLike = Union[CustomAttribute, str]


@dataclass(frozen=True)
class AttributeAssignment:
    """Result of resolving one ``attr(key, value)`` call.

    Parameters
    ----------
    name : str
        Attribute name the value is stored under (may differ from the key)
    fragments : tuple[str, ...]
        Sanitized fragments to store or append
    mode : AccumulationMode
        How the fragments combine with previously stored ones

    """

    name: str
    fragments: tuple[str, ...]
    mode: AccumulationMode


def _build_default_policies() -> tuple[AttributePolicy, ...]:
    policies: list[AttributePolicy] = []
    for name in DEFAULT_ALLOWED_ATTRIBUTES:
        if name == CLASS_ATTRIBUTE:
            mode = AccumulationMode.APPEND_SPACE_SEPARATED
        elif name == STYLE_ATTRIBUTE:
            mode = AccumulationMode.APPEND_SEMICOLON_SEPARATED
        else:
            mode = AccumulationMode.REPLACE
        policies.append(AttributePolicy(name=name, mode=mode))
    for name in DEFAULT_URL_ATTRIBUTES + HTMX_URL_ATTRIBUTES:
        policies.append(AttributePolicy(name=name, sanitizer=SanitizerKind.URL))
    return tuple(policies)


# Built-in policy records, in registration order
DEFAULT_POLICIES: tuple[AttributePolicy, ...] = _build_default_policies()


def _custom_attribute_name(attribute: CustomAttributeLike) -> str:
    name = attribute.name if isinstance(attribute, CustomAttribute) else attribute
    if not isinstance(name, str) or not ATTRIBUTE_NAME_PATTERN.fullmatch(name):
        raise ValidationError(
            "Custom attribute name must be a non-empty string without whitespace, quotes, <, >, / or =",
            parameter_name="custom_attributes",
            parameter_value=attribute,
        )
    return name


class PolicyTable:
    """Mapping from attribute name to :class:`AttributePolicy`.

    Parameters
    ----------
    custom_attributes : Sequence[CustomAttribute | str], optional
        Additional attribute names to allow. A name that collides with a
        built-in policy keeps the built-in entry; other names are registered
        with escape-only sanitization and ``REPLACE`` mode.
    options : GeneratorOptions, optional
        Options controlling URL sanitization and the unknown-attribute fallback

    Raises
    ------
    ValidationError
        If a custom attribute name is empty or not a valid attribute name

    """

    def __init__(
        self,
        custom_attributes: Sequence[CustomAttributeLike] | None = None,
        options: GeneratorOptions | None = None,
    ) -> None:
        self.options = options or GeneratorOptions()
        self._policies: dict[str, AttributePolicy] = {policy.name: policy for policy in DEFAULT_POLICIES}

        for attribute in custom_attributes or ():
            name = _custom_attribute_name(attribute)
            if name in self._policies:
                logger.debug("Custom attribute %r already has a built-in policy; keeping it", name)
                continue
            self._policies[name] = AttributePolicy(name=name)

    def __contains__(self, name: object) -> bool:
        return name in self._policies

    def __getitem__(self, name: str) -> AttributePolicy:
        return self._policies[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._policies)

    def __len__(self) -> int:
        return len(self._policies)

    def get(self, name: str) -> AttributePolicy | None:
        """Return the policy registered for ``name``, or None."""
        return self._policies.get(name)

    def policies(self) -> Iterable[AttributePolicy]:
        """Iterate over all registered policies in registration order."""
        return self._policies.values()

    def register(
        self,
        name: str,
        *,
        allowed: bool = True,
        mode: AccumulationMode = AccumulationMode.REPLACE,
        sanitizer: SanitizerKind = SanitizerKind.ESCAPE,
    ) -> AttributePolicy:
        """Register or overwrite the policy for ``name``.

        Unlike custom attributes passed at construction time, an explicit
        registration replaces an existing entry, including built-in ones.
        Registering ``allowed=False`` makes the name behave like an unknown
        attribute.

        Parameters
        ----------
        name : str
            Attribute name
        allowed : bool, default True
            Whether the attribute is emitted under its own name
        mode : AccumulationMode, default REPLACE
            Accumulation mode
        sanitizer : SanitizerKind, default ESCAPE
            Sanitizer to run on assigned values

        Returns
        -------
        AttributePolicy
            The registered policy

        Raises
        ------
        ValidationError
            If ``name`` is empty or not a valid attribute name

        """
        if not ATTRIBUTE_NAME_PATTERN.fullmatch(name):
            raise ValidationError(
                f"Invalid attribute name: {name!r}", parameter_name="name", parameter_value=name
            )

        policy = AttributePolicy(name=name, allowed=allowed, mode=mode, sanitizer=sanitizer)
        if name in self._policies:
            logger.debug("Overwriting policy for attribute %r", name)
        self._policies[name] = policy
        return policy

    def resolve(self, key: str, value: str) -> AttributeAssignment:
        """Resolve an attribute assignment against the table.

        Parameters
        ----------
        key : str
            Attribute name as given by the caller
        value : str
            Raw attribute value

        Returns
        -------
        AttributeAssignment
            Target attribute name, sanitized fragments and accumulation mode

        """
        policy = self._policies.get(key)
        if policy is not None and policy.allowed:
            sanitized = policy.sanitize(value, self.options)
            if policy.mode is AccumulationMode.APPEND_SPACE_SEPARATED:
                return AttributeAssignment(key, tuple(sanitized.split()), policy.mode)
            return AttributeAssignment(key, (sanitized,), policy.mode)

        escaped = escape_text(value)
        if key.startswith(self.options.passthrough_prefixes):
            return AttributeAssignment(key, (escaped,), AccumulationMode.REPLACE)

        demoted = self.options.fallback_prefix + key
        logger.debug("Attribute %r is not allowed; storing it as %r", key, demoted)
        return AttributeAssignment(demoted, (escaped,), AccumulationMode.REPLACE)


def _strip_declaration_end(fragment: str) -> str:
    """Remove trailing semicolons and whitespace, keeping entity terminators."""
    result = fragment.strip()
    while result.endswith(";") and not _ENTITY_TAIL.search(result):
        result = result[:-1].rstrip()
    return result


def join_fragments(mode: AccumulationMode, fragments: Sequence[str]) -> str:
    """Join stored fragments into a single attribute value.

    Parameters
    ----------
    mode : AccumulationMode
        Mode the fragments were accumulated with
    fragments : Sequence[str]
        Stored, already sanitized fragments

    Returns
    -------
    str
        Attribute value

    Examples
    --------
        >>> join_fragments(AccumulationMode.APPEND_SPACE_SEPARATED, ["btn", "primary"])
        'btn primary'
        >>> join_fragments(AccumulationMode.APPEND_SEMICOLON_SEPARATED, ["color: red;", "font-size: 12px"])
        'color: red; font-size: 12px;'

    """
    if mode is AccumulationMode.APPEND_SEMICOLON_SEPARATED:
        declarations = [d for d in (_strip_declaration_end(f) for f in fragments) if d]
        if not declarations:
            return ""
        return "; ".join(declarations) + ";"
    return " ".join(fragments)
