#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html_simple/serialize.py
"""Serialize an element tree to HTML markup.

Values stored on elements are already sanitized, so serialization never
escapes anything: it walks the tree top-down and joins what it finds.

Output notes:

- The implicit root (empty tag name) emits only its children.
- Void elements are emitted as ``<name attr="value" />`` with no closing
  tag; children or content are never emitted for them.
- Attribute order is implementation-defined. This implementation emits
  attributes in the order each name was first assigned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from html_simple.element import Element


def _render_open_tag(element: Element, parts: list[str]) -> None:
    parts.append("<")
    parts.append(element.tag.name)
    for name, value in element.iter_attributes():
        parts.append(f' {name}="{value}"')


def _render_into(element: Element, parts: list[str]) -> None:
    if element.tag.is_root:
        for child in element.children:
            _render_into(child, parts)
        return

    _render_open_tag(element, parts)

    if element.tag.is_void:
        parts.append(" />")
        return

    parts.append(">")
    if element.content:
        parts.append(element.content)
    for child in element.children:
        _render_into(child, parts)
    parts.append(f"</{element.tag.name}>")


def render(element: Element) -> str:
    """Render ``element`` and its subtree to an HTML string.

    Parameters
    ----------
    element : Element
        Element to serialize

    Returns
    -------
    str
        HTML markup. No DOCTYPE or document wrapper is added.

    """
    parts: list[str] = []
    _render_into(element, parts)
    return "".join(parts)
