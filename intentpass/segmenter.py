"""
intentpass.segmenter

Split a password into contiguous runs of the same character class
(alpha / digit / symbol).
"""

import logging
import re
from typing import List

from .constants import THRESHOLDS, WEAK_SUBSTRINGS
from .models import Segment, SegmentationResult, SegmentType
from .numeric import shannon_entropy

logger = logging.getLogger(__name__)

_ALPHA = re.compile(r"[A-Za-z]")
_DIGIT = re.compile(r"[0-9]")


def char_type(char: str) -> SegmentType:
    if _ALPHA.match(char):
        return SegmentType.ALPHA
    if _DIGIT.match(char):
        return SegmentType.DIGIT
    return SegmentType.SYMBOL


def is_weak_word(text: str) -> bool:
    """True when ``text`` contains a known weak substring of at least 4 chars."""
    lower = text.lower()
    min_len = THRESHOLDS["min_weak_substring_length"]
    return any(weak in lower for weak in WEAK_SUBSTRINGS if len(weak) >= min_len)


def _make_segment(text: str, seg_type: SegmentType) -> Segment:
    return Segment(
        text=text,
        type=seg_type,
        length=len(text),
        entropy=shannon_entropy(text),
        is_weak_word=is_weak_word(text),
    )


def segment_password(password: str) -> SegmentationResult:
    """
    Walk the password left to right and close the current segment whenever
    the character class changes. Joining the segment texts gives back the
    password exactly.
    """
    if not password:
        return SegmentationResult(segments=[], total_segments=0)

    segments: List[Segment] = []
    current = password[0]
    current_type = char_type(password[0])

    for char in password[1:]:
        ctype = char_type(char)
        if ctype != current_type:
            segments.append(_make_segment(current, current_type))
            current = char
            current_type = ctype
        else:
            current += char

    segments.append(_make_segment(current, current_type))
    logger.debug("segmented password into %d runs", len(segments))
    return SegmentationResult(segments=segments, total_segments=len(segments))
