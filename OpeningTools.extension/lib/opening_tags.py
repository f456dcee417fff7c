# -*- coding: utf-8 -*-
"""Comment tags for openings placed by the Add Openings command.

Every created opening gets a Comments value like
``AUTO_OPENING:DUCT:20260117_143022`` so that later runs can recognise
openings they already placed.

Example:
    >>> from opening_tags import generate_tag, parse_tag
    >>> parse_tag("AUTO_OPENING:PIPE:20260117_143022")
    {'prefix': 'AUTO_OPENING', 'discipline': 'PIPE', 'timestamp': '20260117_143022'}
"""
import re
from datetime import datetime
from typing import Dict, Optional


DEFAULT_TAG_PREFIX = "AUTO_OPENING"

# AUTO_OPENING[:DISCIPLINE[:TIMESTAMP]]
TAG_PATTERN = re.compile(
    r"^([A-Z_]+?)(?::([A-Z_]+))?(?::(\d{8}_\d{6}))?$",
    re.IGNORECASE
)


def parse_tag(comment: Optional[str], prefix: str = DEFAULT_TAG_PREFIX) -> Optional[Dict[str, Optional[str]]]:
    """Parse an opening tag from an element comment.

    Args:
        comment: The Comments parameter value.
        prefix: Expected tag prefix.

    Returns:
        Dict with 'prefix', 'discipline', 'timestamp' keys, or None if the
        comment is not an opening tag.

    Examples:
        >>> parse_tag("AUTO_OPENING:DUCT")
        {'prefix': 'AUTO_OPENING', 'discipline': 'DUCT', 'timestamp': None}
        >>> parse_tag("Some other comment")
        None
    """
    if not comment:
        return None

    match = TAG_PATTERN.match(comment.strip())
    if not match or match.group(1).upper() != prefix.upper():
        return None

    return {
        "prefix": match.group(1),
        "discipline": match.group(2),
        "timestamp": match.group(3),
    }


def is_opening_tag(comment: Optional[str], prefix: str = DEFAULT_TAG_PREFIX) -> bool:
    return parse_tag(comment, prefix) is not None


def generate_tag(discipline: str, prefix: str = DEFAULT_TAG_PREFIX, include_timestamp: bool = True) -> str:
    """Generate the Comments tag for a new opening.

    Examples:
        >>> generate_tag("duct", include_timestamp=False)
        'AUTO_OPENING:DUCT'
    """
    discipline = discipline.upper().replace(" ", "_")

    if include_timestamp:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return "{}:{}:{}".format(prefix, discipline, timestamp)

    return "{}:{}".format(prefix, discipline)
