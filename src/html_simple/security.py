#  Copyright (c) 2025 Tom Villani, Ph.D.
"""URL validation for URL-valued HTML attributes.

This module provides the sanitizer applied to every attribute classified as a
URL attribute (``href``, ``src``, ``action`` and friends). It is the only XSS
defense for those attributes, so it never raises: anything it cannot parse or
does not trust is replaced by a fallback value.

Functions
---------
- sanitize_url: Validate a URL by scheme and return its escaped, re-serialized form
- parse_url: Parse a URL the way sanitize_url does, returning None on failure
"""

from __future__ import annotations

import logging
import re
from collections.abc import Collection
from urllib.parse import SplitResult, urlsplit, urlunsplit

from html_simple.constants import DEFAULT_BLOCKED_URL_SCHEMES, DEFAULT_URL_FALLBACK
from html_simple.escape import escape_text

logger = logging.getLogger(__name__)

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def parse_url(url: str) -> SplitResult | None:
    """Parse a URL, returning None when it is malformed.

    A URL is considered malformed when it contains ASCII control characters,
    starts with a colon (a scheme separator without a scheme), contains a
    percent sign not followed by two hex digits, or is rejected by
    :func:`urllib.parse.urlsplit` (for example an unbalanced IPv6 bracket).

    Parameters
    ----------
    url : str
        Candidate URL

    Returns
    -------
    SplitResult or None
        Parsed URL components, or None if parsing failed

    """
    if _CONTROL_CHARS.search(url):
        return None
    if url.startswith(":"):
        return None
    if _BAD_PERCENT_ESCAPE.search(url):
        return None

    try:
        return urlsplit(url)
    except ValueError as e:
        logger.debug("URL parse error for %r: %s", url, e)
        return None


def sanitize_url(
    url: str,
    *,
    fallback: str = DEFAULT_URL_FALLBACK,
    blocked_schemes: Collection[str] = DEFAULT_BLOCKED_URL_SCHEMES,
) -> str:
    """Sanitize a URL attribute value.

    Parameters
    ----------
    url : str
        Raw attribute value
    fallback : str, default "#"
        Value returned for unparseable or rejected URLs
    blocked_schemes : Collection[str], default {"javascript"}
        Schemes that are always rejected. Compared against the scheme as
        lowercased by the parser.

    Returns
    -------
    str
        The escaped, re-serialized URL, or ``fallback``

    Examples
    --------
        >>> sanitize_url("https://example.com?a=1&b=2")
        'https://example.com?a=1&amp;b=2'
        >>> sanitize_url("JavaScript:alert(1)")
        '#'
        >>> sanitize_url("foo/bar")
        '#'
        >>> sanitize_url("/foo/bar")
        '/foo/bar'

    Notes
    -----
    URLs without a scheme must have a path starting with ``/``. This rejects
    bare relative paths, query-only and fragment-only URLs. Protocol-relative
    URLs (``//host/path``) have a rooted path and therefore pass.

    """
    parts = parse_url(url)
    if parts is None:
        logger.debug("Rejected unparseable URL: %r", url)
        return fallback

    if parts.scheme in {scheme.lower() for scheme in blocked_schemes}:
        logger.debug("Rejected URL with blocked scheme %r: %r", parts.scheme, url)
        return fallback

    if not parts.scheme and not parts.path.startswith("/"):
        logger.debug("Rejected relative URL without rooted path: %r", url)
        return fallback

    return escape_text(urlunsplit(parts))
