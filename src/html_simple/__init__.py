"""html_simple - Safe, programmatic HTML generation.

html_simple builds HTML through a fluent element tree and sanitizes every
attribute value and text fragment as it is assigned, so untrusted input cannot
break out of an attribute or tag context.

Key Features
------------
- Fluent tree construction with one method per known HTML tag
- Entity escaping for all text content and attribute values
- URL scheme validation for ``href``, ``src`` and other URL attributes
- Accumulating ``class`` and ``style`` attributes
- Unknown attributes (``onclick`` and other event handlers) demoted to
  inert ``data-`` attributes

Examples
--------
Build a small document:

    >>> from html_simple import Generator
    >>> gen = Generator()
    >>> card = gen.root.div().attr("class", "card").attr("class", "wide")
    >>> link = card.a().attr("href", "/docs").attr("onclick", "steal()").add_text("Docs & more")
    >>> gen.generate()
    '<div class="card wide"><a href="/docs" data-onclick="steal()">Docs &amp; more</a></div>'

"""

from html_simple.element import KV, Element, KeyValue
from html_simple.escape import escape_text
from html_simple.exceptions import (
    DependencyError,
    HtmlSimpleError,
    InvalidTagError,
    ValidationError,
    VoidElementError,
)
from html_simple.generator import Generator
from html_simple.options import GeneratorOptions
from html_simple.policy import (
    DEFAULT_POLICIES,
    AccumulationMode,
    AttributePolicy,
    CustomAttribute,
    PolicyTable,
    SanitizerKind,
)
from html_simple.security import sanitize_url
from html_simple.serialize import render
from html_simple.tags import TAG_TABLE, Tag, TagKind

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_POLICIES",
    "KV",
    "TAG_TABLE",
    "AccumulationMode",
    "AttributePolicy",
    "CustomAttribute",
    "DependencyError",
    "Element",
    "Generator",
    "GeneratorOptions",
    "HtmlSimpleError",
    "InvalidTagError",
    "KeyValue",
    "PolicyTable",
    "SanitizerKind",
    "Tag",
    "TagKind",
    "ValidationError",
    "VoidElementError",
    "escape_text",
    "render",
    "sanitize_url",
]
