#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html_simple/generator.py
"""HTML generator owning an element tree and its attribute policy table.

A :class:`Generator` is the entry point of the library: it builds the merged
attribute policy table once, exposes an implicit root element to build on, and
serializes the whole tree on demand.

Notes
-----
A generator and its tree are not safe for concurrent mutation. Callers that
share one across threads must provide their own locking.

"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from html_simple.element import Element
from html_simple.options import GeneratorOptions
from html_simple.policy import AccumulationMode, AttributePolicy, CustomAttributeLike, PolicyTable, SanitizerKind
from html_simple.serialize import render
from html_simple.tags import ROOT_TAG

logger = logging.getLogger(__name__)


class Generator:
    """Build sanitized HTML through a fluent element tree.

    Parameters
    ----------
    custom_attributes : Sequence[CustomAttribute | str], optional
        Extra attribute names to allow with escape-only sanitization. Names
        that already have a built-in policy keep it.
    options : GeneratorOptions, optional
        Generator configuration. Defaults to ``GeneratorOptions()``.

    Attributes
    ----------
    root : Element
        Implicit root element; renders only its children
    policies : PolicyTable
        Attribute policy table consulted on every attribute assignment
    options : GeneratorOptions
        Active configuration

    Examples
    --------
        >>> gen = Generator()
        >>> link = gen.root.a().attr("href", "javascript:alert(1)").add_text("x")
        >>> gen.generate()
        '<a href="#">x</a>'

    """

    def __init__(
        self,
        custom_attributes: Sequence[CustomAttributeLike] | None = None,
        options: GeneratorOptions | None = None,
    ) -> None:
        self.options = options or GeneratorOptions()
        self.policies = PolicyTable(custom_attributes, options=self.options)
        self.root = Element(ROOT_TAG, self)
        logger.debug("Created generator with %d attribute policies", len(self.policies))

    def register_attribute(
        self,
        name: str,
        *,
        allowed: bool = True,
        mode: AccumulationMode = AccumulationMode.REPLACE,
        sanitizer: SanitizerKind = SanitizerKind.ESCAPE,
    ) -> AttributePolicy:
        """Register or overwrite an attribute policy. See :meth:`PolicyTable.register`."""
        return self.policies.register(name, allowed=allowed, mode=mode, sanitizer=sanitizer)

    def generate(self) -> str:
        """Return the HTML markup for the whole tree."""
        return render(self.root)

    def __str__(self) -> str:
        return self.generate()
