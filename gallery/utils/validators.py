"""
Input validation functions for the Region Gallery application.
"""
import re
import logging
from typing import Optional

from ..config import DEFAULT_OFFSET, MAX_PAGE_LIMIT
from ..exceptions import BadRequestError, ForbiddenError

logger = logging.getLogger(__name__)

TRAVERSAL_MARKER = ".."
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def validate_path_segment(field: str, value: str, message: str = "Forbidden") -> str:
    """
    Reject a path segment that contains a parent-directory marker.

    The check is a plain substring match, so "a..b" is rejected as well.

    Args:
        field: Name of the segment being checked ("region" or "filename")
        value: Segment taken from the request path
        message: Error message returned to the client

    Returns:
        str: The unchanged segment

    Raises:
        ForbiddenError: If the segment contains ".."
    """
    if TRAVERSAL_MARKER in value:
        logger.warning(f"Rejected traversal attempt in {field}: {value!r}")
        raise ForbiddenError(field, message)
    return value


def normalize_region(region: Optional[str]) -> str:
    """
    Lowercase a region path segment.

    Args:
        region: Region segment from the request path

    Returns:
        str: Lowercased region name

    Raises:
        BadRequestError: If the region segment is missing
    """
    if not region:
        raise BadRequestError("Missing region")
    return region.lower()


def _parse_int(value: Optional[str]) -> Optional[int]:
    """Parse a plain ASCII decimal integer, or return None."""
    if not value or not INTEGER_PATTERN.fullmatch(value):
        return None
    return int(value)


def parse_offset(value: Optional[str]) -> int:
    """
    Parse the offset query parameter.

    Missing, non-numeric and negative values all become the default offset.
    """
    offset = _parse_int(value)
    if offset is None:
        return DEFAULT_OFFSET

    return offset if offset >= 0 else DEFAULT_OFFSET


def parse_limit(value: Optional[str]) -> int:
    """
    Parse the limit query parameter.

    Args:
        value: Raw query string value

    Returns:
        int: A limit in (0, MAX_PAGE_LIMIT]; anything outside that range,
        including a missing or non-numeric value, becomes MAX_PAGE_LIMIT
    """
    limit = _parse_int(value)
    if limit is None or limit <= 0 or limit > MAX_PAGE_LIMIT:
        limit = MAX_PAGE_LIMIT
    return limit
