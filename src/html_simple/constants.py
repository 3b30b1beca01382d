#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html_simple/constants.py
"""Constants and default values for html_simple.

This module centralizes the attribute name sets, prefixes, fallback values and
tag lists used by the policy engine, the element tree and the tag table.
"""

from __future__ import annotations

import re

# Attributes allowed out of the box with escape-only sanitization
DEFAULT_ALLOWED_ATTRIBUTES: tuple[str, ...] = (
    "accept",
    "accept-charset",
    "accesskey",
    "allow",
    "alt",
    "as",
    "async",
    "autocapitalize",
    "autocomplete",
    "autoplay",
    "background",
    "bgcolor",
    "border",
    "capture",
    "charset",
    "checked",
    "cite",
    "class",
    "color",
    "cols",
    "colspan",
    "content",
    "contenteditable",
    "controls",
    "coords",
    "crossorigin",
    "data",
    "data-*",
    "datetime",
    "decoding",
    "default",
    "defer",
    "dir",
    "dirname",
    "disabled",
    "download",
    "draggable",
    "enctype",
    "enterkeyhint",
    "for",
    "form",
    "formenctype",
    "formmethod",
    "formnovalidate",
    "formtarget",
    "headers",
    "height",
    "hidden",
    "high",
    "hreflang",
    "http-equiv",
    "id",
    "integrity",
    "inputmode",
    "ismap",
    "itemprop",
    "kind",
    "label",
    "lang",
    "loading",
    "list",
    "loop",
    "low",
    "max",
    "maxlength",
    "minlength",
    "media",
    "method",
    "min",
    "multiple",
    "muted",
    "name",
    "novalidate",
    "open",
    "optimum",
    "pattern",
    "placeholder",
    "playsinline",
    "preload",
    "readonly",
    "referrerpolicy",
    "rel",
    "required",
    "reversed",
    "role",
    "rows",
    "rowspan",
    "sandbox",
    "scope",
    "selected",
    "shape",
    "size",
    "sizes",
    "slot",
    "span",
    "spellcheck",
    "srcdoc",
    "srclang",
    "start",
    "step",
    "style",
    "tabindex",
    "target",
    "title",
    "translate",
    "type",
    "usemap",
    "value",
    "width",
    "wrap",
)

# URL-valued attributes, sanitized with the URL validator
DEFAULT_URL_ATTRIBUTES: tuple[str, ...] = (
    "href",
    "src",
    "action",
    "formaction",
    "srcset",
    "ping",
    "poster",
)

# HTMX request attributes carry URLs too
HTMX_URL_ATTRIBUTES: tuple[str, ...] = (
    "hx-get",
    "hx-post",
    "hx-put",
    "hx-patch",
    "hx-delete",
)

CLASS_ATTRIBUTE = "class"
STYLE_ATTRIBUTE = "style"

# Unknown attributes with these prefixes are kept under their own name
DEFAULT_PASSTHROUGH_PREFIXES: tuple[str, ...] = ("js-", "data-")

# Prefix used to demote unknown attribute names to inert data attributes
DEFAULT_FALLBACK_PREFIX = "data-"

# URL handling
DEFAULT_URL_FALLBACK = "#"
DEFAULT_BLOCKED_URL_SCHEMES = frozenset({"javascript"})

DEFAULT_STRICT_MODE = False

# Tag names accepted by Element.add / Element.add_void (use fullmatch)
TAG_NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9-]*")

# Attribute names accepted by Element.attr (use fullmatch)
ATTRIBUTE_NAME_PATTERN = re.compile(r"[^\s\"'<>/=\x00-\x1f\x7f]+")

HTML_TAGS: tuple[str, ...] = (
    "a",
    "abbr",
    "acronym",
    "address",
    "area",
    "article",
    "aside",
    "audio",
    "b",
    "base",
    "bdi",
    "bdo",
    "big",
    "blockquote",
    "body",
    "br",
    "button",
    "canvas",
    "caption",
    "center",
    "cite",
    "code",
    "col",
    "colgroup",
    "data",
    "datalist",
    "dd",
    "del",
    "details",
    "dfn",
    "dialog",
    "dir",
    "div",
    "dl",
    "dt",
    "em",
    "embed",
    "fencedframe",
    "fieldset",
    "figcaption",
    "figure",
    "font",
    "footer",
    "form",
    "frame",
    "frameset",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "head",
    "header",
    "hgroup",
    "hr",
    "html",
    "i",
    "iframe",
    "img",
    "input",
    "ins",
    "kbd",
    "label",
    "legend",
    "li",
    "link",
    "main",
    "map",
    "mark",
    "marquee",
    "math",
    "menu",
    "meta",
    "meter",
    "nav",
    "nobr",
    "noembed",
    "noframes",
    "noscript",
    "object",
    "ol",
    "optgroup",
    "option",
    "output",
    "p",
    "param",
    "picture",
    "plaintext",
    "portal",
    "pre",
    "progress",
    "q",
    "rb",
    "rp",
    "rt",
    "rtc",
    "ruby",
    "s",
    "samp",
    "script",
    "search",
    "section",
    "select",
    "slot",
    "small",
    "source",
    "span",
    "strike",
    "strong",
    "style",
    "sub",
    "summary",
    "sup",
    "svg",
    "table",
    "tbody",
    "td",
    "template",
    "textarea",
    "tfoot",
    "th",
    "thead",
    "time",
    "title",
    "tr",
    "track",
    "tt",
    "u",
    "ul",
    "var",
    "video",
    "wbr",
    "xmp",
)

# Elements that never have children, content or a closing tag
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)
