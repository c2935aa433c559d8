"""
File loading for card lists.
"""

from pathlib import Path
from typing import Union
import logging

logger = logging.getLogger(__name__)


def read_listing_file(filepath: Union[str, Path]) -> str:
    """
    Read a card list file into a string.

    Args:
        filepath: Path to the text file

    Returns:
        The whole file content, decoded as UTF-8

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    try:
        with open(filepath, 'r', encoding='utf-8', newline='') as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed loading file {filepath}: {e}")
        raise

    logger.debug(f"Read {len(content)} characters from {filepath}")
    return content
