"""Whitespace normalization for joined text, comment and CDATA content."""

import re
from typing import Optional

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_space(text: Optional[str]) -> str:
    """Collapse every run of whitespace characters to a single space.

    Line breaks count as whitespace, so multi-line content is joined onto one
    line. Non-whitespace characters keep their order; nothing is trimmed.

    Args:
        text: Content to normalize, ``None`` is treated as empty

    Returns:
        Normalized text

    Example:
        >>> normalize_space("a \\n  b")
        'a b'
    """
    if not text:
        return ""
    return _WHITESPACE_RUN.sub(" ", text)
