#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html_simple/tags.py
"""Tag identities and the static table of known HTML tags.

A :class:`Tag` is a small tagged variant: a literal tag name plus a
:class:`TagKind` telling whether the element is normal (children, content and
a closing tag) or void (no children, no content, no closing tag).

The table maps every known tag name to its kind and drives the per-tag
convenience constructors on :class:`html_simple.element.Element`.
"""

from __future__ import annotations

import keyword
from dataclasses import dataclass
from enum import Enum

from html_simple.constants import HTML_TAGS, TAG_NAME_PATTERN, VOID_ELEMENTS
from html_simple.exceptions import InvalidTagError


class TagKind(Enum):
    """Kind of an HTML element."""

    NORMAL = "normal"
    VOID = "void"


@dataclass(frozen=True)
class Tag:
    """Identity of an element: its name and kind.

    Parameters
    ----------
    name : str
        Tag name. The empty name is reserved for the implicit root.
    kind : TagKind, default NORMAL
        Whether the element is normal or void

    Raises
    ------
    InvalidTagError
        If ``name`` is neither empty nor a valid tag name

    """

    name: str
    kind: TagKind = TagKind.NORMAL

    def __post_init__(self) -> None:
        if self.name and not TAG_NAME_PATTERN.fullmatch(self.name):
            raise InvalidTagError(self.name)

    @property
    def is_void(self) -> bool:
        return self.kind is TagKind.VOID

    @property
    def is_root(self) -> bool:
        return not self.name


ROOT_TAG = Tag("")

# Known tags, keyed by name
TAG_TABLE: dict[str, Tag] = {
    name: Tag(name, TagKind.VOID if name in VOID_ELEMENTS else TagKind.NORMAL) for name in HTML_TAGS
}


def method_name_for(tag_name: str) -> str:
    """Return the convenience method name for ``tag_name``.

    Tag names that are Python keywords (``del``) get a trailing underscore.
    """
    return f"{tag_name}_" if keyword.iskeyword(tag_name) else tag_name


def lookup_tag(name: str) -> Tag | None:
    """Look up a known tag by name or by its convenience method name.

    Parameters
    ----------
    name : str
        Tag name (``"div"``) or method name (``"del_"``)

    Returns
    -------
    Tag or None
        The tag, or None if the name is not in the table

    """
    tag = TAG_TABLE.get(name)
    if tag is None and name.endswith("_"):
        tag = TAG_TABLE.get(name[:-1])
    return tag


def get_tag(name: str) -> Tag:
    """Return the known tag named ``name``.

    Raises
    ------
    InvalidTagError
        If ``name`` is not a known HTML tag

    """
    tag = lookup_tag(name)
    if tag is None:
        raise InvalidTagError(name, message=f"Unknown HTML tag: {name!r}")
    return tag
