#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html_simple/escape.py
"""Text and attribute escaping for generated HTML."""

from __future__ import annotations

import html


def escape_text(text: str) -> str:
    """Escape HTML special characters in text or attribute values.

    Replaces ``&``, ``<``, ``>``, ``"`` and ``'`` with character entities.
    All other characters pass through unchanged. Escaping is not idempotent:
    escaping an already escaped string encodes the ampersands again.

    Parameters
    ----------
    text : str
        Raw text

    Returns
    -------
    str
        Text safe for element content and double-quoted attribute values

    Examples
    --------
        >>> escape_text("<b>Tom & Jerry's</b>")
        '&lt;b&gt;Tom &amp; Jerry&#x27;s&lt;/b&gt;'

    """
    if not text:
        return text
    return html.escape(text, quote=True)
