"""
File helper utilities for the Region Gallery application.
"""
from ..config import IMAGE_EXTENSIONS


def is_image(filename: str) -> bool:
    """
    Check whether a filename has a recognised image extension.

    Args:
        filename: Name of a directory entry

    Returns:
        bool: True for .jpg, .jpeg, .png, .gif and .webp (any case)
    """
    file_ext = '.' + filename.rsplit('.', 1)[-1].lower() if '.' in filename else ''
    return file_ext in IMAGE_EXTENSIONS
