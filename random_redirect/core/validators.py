"""
Input Validators

Shared helpers used by the settings sanitizer. They never raise: each
returns a verdict (or a coerced value) for a single raw input so callers
can decide how to report problems.
"""

import math
import re
from urllib.parse import urlparse

# Letters, digits, underscore, hyphen and forward slash
KEYWORD_PATTERN = re.compile(r'^[A-Za-z0-9_/-]+$')

# RFC 3986 scheme: ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
SCHEME_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9+.-]*$')

DEFAULT_MAX_URL_LENGTH = 2048


def is_valid_url(url: str, max_length: int = DEFAULT_MAX_URL_LENGTH) -> bool:
    """
    Check that a string is a well-formed absolute URL.

    A URL is accepted when it has a syntactically valid scheme and an
    authority with a non-empty host. Any scheme is allowed; relative
    references, bare host names and URLs containing whitespace are not.

    Args:
        url: The URL string to validate
        max_length: Maximum allowed length (default: 2048 per RFC 7230)

    Returns:
        True if the URL is well-formed, False otherwise
    """
    if not url or not isinstance(url, str):
        return False

    if len(url) > max_length:
        return False

    if any(char.isspace() for char in url):
        return False

    try:
        result = urlparse(url)
        # Out-of-range or non-numeric ports only surface on access
        result.port
    except ValueError:
        return False

    if not SCHEME_PATTERN.match(result.scheme) or not result.netloc:
        return False

    return bool(result.hostname)


def parse_weight(value) -> float:
    """
    Coerce a raw weight into a finite, non-negative float.

    Empty strings, non-numeric input, booleans, NaN, infinities and
    negative numbers all become 0.0.

    Example:
        parse_weight("50") -> 50.0
        parse_weight(" 12.5 ") -> 12.5
        parse_weight("abc") -> 0.0
        parse_weight(-3) -> 0.0
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0

    try:
        weight = float(value)
    except (TypeError, ValueError):
        return 0.0

    if not math.isfinite(weight) or weight <= 0:
        return 0.0

    return weight
