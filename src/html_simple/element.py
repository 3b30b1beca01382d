#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html_simple/element.py
"""Element tree for programmatic HTML construction.

Elements are created through their parent, never standalone, so every node
belongs to exactly one tree owned by a :class:`~html_simple.generator.Generator`.
All values are sanitized when they are assigned; the serializer only joins
and emits what the element already holds.

Examples
--------
Build a small fragment::

    >>> from html_simple import Generator
    >>> gen = Generator()
    >>> box = gen.root.div().attr("class", "container")
    >>> box.div().add_text("Hi")  # doctest: +ELLIPSIS
    <Element div ...>
    >>> gen.generate()
    '<div class="container"><div>Hi</div></div>'

"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from functools import partial
from typing import TYPE_CHECKING, Any, NamedTuple, Union

from html_simple.constants import ATTRIBUTE_NAME_PATTERN
from html_simple.escape import escape_text
from html_simple.exceptions import InvalidTagError, ValidationError, VoidElementError
from html_simple.policy import AccumulationMode, join_fragments
from html_simple.serialize import render
from html_simple.tags import Tag, TagKind, get_tag, lookup_tag

if TYPE_CHECKING:
    from html_simple.generator import Generator

logger = logging.getLogger(__name__)


class KeyValue(NamedTuple):
    """An attribute name and value pair for :meth:`Element.with_attrs`."""

    key: str
    value: str


def KV(key: str, value: str) -> KeyValue:  # noqa: N802
    """Create a :class:`KeyValue` pair."""
    return KeyValue(key, value)


AttributePair = Union[KeyValue, tuple[str, str]]


class Element:
    """An HTML element holding a tag, attributes, children and text content.

    Parameters
    ----------
    tag : Tag
        Tag identity
    generator : Generator
        Generator owning the tree; supplies the policy table and options
    parent : Element, optional
        Parent element. None for the root and for detached elements.

    Attributes
    ----------
    attributes : dict[str, list[str]]
        Sanitized fragments per attribute name, in first-assignment order
    children : list[Element]
        Child elements in insertion order
    content : str
        Escaped text content

    """

    def __init__(self, tag: Tag, generator: Generator, parent: Element | None = None) -> None:
        self.tag = tag
        self.generator = generator
        self.parent = parent
        self.attributes: dict[str, list[str]] = {}
        self.children: list[Element] = []
        self.content = ""
        self._modes: dict[str, AccumulationMode] = {}

    def __repr__(self) -> str:
        return f"<Element {self.tag.name or '(root)'} attrs={len(self.attributes)} children={len(self.children)}>"

    def __str__(self) -> str:
        return self.render()

    def __getattr__(self, name: str) -> Any:
        # Per-tag constructors: element.div(), element.br(), element.del_()
        if name.startswith("__"):
            raise AttributeError(name)
        tag = lookup_tag(name)
        if tag is None:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return partial(self._append, tag)

    @property
    def is_void(self) -> bool:
        return self.tag.is_void

    def _misuse(self, error: ValidationError) -> None:
        if self.generator.options.strict:
            raise error
        logger.warning("%s; ignoring", error.message)

    def _append(self, tag: Tag) -> Element:
        if tag.is_root:
            raise InvalidTagError(tag.name, message="Child elements need a non-empty tag name")
        child = Element(tag, self.generator, parent=self)
        if self.is_void:
            self._misuse(VoidElementError(self.tag.name, "add"))
            # Hand back a detached element so chained calls stay harmless
            child.parent = None
            return child
        self.children.append(child)
        return child

    def add(self, name: str) -> Element:
        """Create a normal element named ``name`` and append it as a child.

        Raises
        ------
        InvalidTagError
            If ``name`` is not a valid tag name

        """
        return self._append(Tag(name, TagKind.NORMAL))

    def add_void(self, name: str) -> Element:
        """Create a void element named ``name`` and append it as a child.

        Raises
        ------
        InvalidTagError
            If ``name`` is not a valid tag name

        """
        return self._append(Tag(name, TagKind.VOID))

    def add_tag(self, name: str) -> Element:
        """Create a known HTML element, normal or void according to the tag table.

        Raises
        ------
        InvalidTagError
            If ``name`` is not a known HTML tag

        """
        return self._append(get_tag(name))

    def attr(self, key: str, value: Any) -> Element:
        """Set an attribute, sanitized according to the generator's policy table.

        ``class`` values accumulate space separated, ``style`` values
        accumulate semicolon separated, and other allowed attributes are
        replaced. Unknown attribute names are stored as ``data-<key>`` unless
        they already carry a pass-through prefix (``data-``, ``js-``).
        Non-string values are converted with :func:`str`.

        Parameters
        ----------
        key : str
            Attribute name
        value : Any
            Raw attribute value

        Returns
        -------
        Element
            This element, for chaining

        Notes
        -----
        An empty key, or one that could end the attribute (whitespace,
        quotes, ``<``, ``>``, ``/``, ``=`` or control characters), is misuse:
        the call is ignored with a warning, or raises ``ValidationError`` in
        strict mode.

        Examples
        --------
        Accumulate classes and demote an event handler::

            el.attr("class", "btn").attr("class", "primary")
            # class="btn primary"
            el.attr("onclick", "alert('Hi')")
            # data-onclick="alert(&#x27;Hi&#x27;)"

        """
        if not key:
            self._misuse(ValidationError("Attribute name must be a non-empty string", parameter_name="key"))
            return self
        if not ATTRIBUTE_NAME_PATTERN.fullmatch(key):
            self._misuse(
                ValidationError(f"Invalid attribute name: {key!r}", parameter_name="key", parameter_value=key)
            )
            return self

        assignment = self.generator.policies.resolve(key, value if isinstance(value, str) else str(value))
        if assignment.mode is AccumulationMode.REPLACE:
            self.attributes[assignment.name] = list(assignment.fragments)
        else:
            self.attributes.setdefault(assignment.name, []).extend(assignment.fragments)
        self._modes[assignment.name] = assignment.mode
        return self

    def with_attrs(self, *pairs: AttributePair) -> Element:
        """Set several attributes in order.

        Parameters
        ----------
        *pairs : KeyValue or tuple[str, str]
            Attribute name and value pairs

        Returns
        -------
        Element
            This element, for chaining

        """
        for key, value in pairs:
            self.attr(key, value)
        return self

    def add_text(self, content: str) -> Element:
        """Append escaped text content to this element.

        Returns
        -------
        Element
            This element, for chaining

        """
        if self.is_void:
            self._misuse(VoidElementError(self.tag.name, "add_text"))
            return self
        self.content += escape_text(content)
        return self

    def attribute_value(self, name: str) -> str | None:
        """Return the joined value of attribute ``name``, or None if unset."""
        fragments = self.attributes.get(name)
        if fragments is None:
            return None
        return join_fragments(self._modes.get(name, AccumulationMode.REPLACE), fragments)

    def iter_attributes(self) -> Iterator[tuple[str, str]]:
        """Yield ``(name, value)`` pairs in first-assignment order."""
        for name in self.attributes:
            value = self.attribute_value(name)
            if value is not None:
                yield name, value

    def render(self) -> str:
        """Serialize this element and its subtree to HTML."""
        return render(self)
