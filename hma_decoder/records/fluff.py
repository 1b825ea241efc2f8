"""Fluff (background text) assembly."""
import logging
from typing import Optional, Sequence

from ..parser.constants import FLUFF_HEADERS, FLUFF_MIN_LENGTH

logger = logging.getLogger(__name__)


def assemble_fluff(sections: Sequence[str]) -> Optional[str]:
    """Join the six fluff sections under their headers.

    Returns None when the sections hold FLUFF_MIN_LENGTH characters or fewer
    in total, headers not counted.
    """
    if len(sections) != len(FLUFF_HEADERS):
        raise ValueError(f"Expected {len(FLUFF_HEADERS)} fluff sections, got {len(sections)}")

    text_length = sum(len(section) for section in sections)
    if text_length <= FLUFF_MIN_LENGTH:
        logger.debug(f"Fluff too short ({text_length} characters), dropping it")
        return None

    return ''.join(header + section for header, section in zip(FLUFF_HEADERS, sections))
