"""
Child-safety check for generated lesson text.

Generated content containing blocked or anxiety-inducing words is
rejected and replaced with fallback content by the session generator.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

# Inappropriate words/topics for children
BLOCKED_WORDS = [
    "violence",
    "weapon",
    "gun",
    "knife",
    "blood",
    "death",
    "kill",
    "scary",
    "horror",
    "monster",
    "ghost",
]

# Anxiety-inducing topics to avoid for autism-friendly content
ANXIETY_TOPICS = [
    "emergency",
    "alarm",
    "siren",
    "fire",
    "accident",
    "lost",
    "alone",
    "afraid",
    "worried",
    "confused",
]

_WORD_RE = re.compile(r"[a-z]+(?:'[a-z]+)?")


@dataclass
class FilterResult:
    approved: bool
    reason: Optional[str] = None
    flagged_words: List[str] = field(default_factory=list)


def quick_filter(content: str) -> FilterResult:
    """
    Reject content using any blocked or anxiety-inducing word.

    Matches whole words and their simple plurals, so "fires" is flagged
    but "firefly" is not.
    """
    words = set(_WORD_RE.findall(content.lower()))
    flagged = [
        term for term in BLOCKED_WORDS + ANXIETY_TOPICS
        if term in words or f"{term}s" in words
    ]

    if flagged:
        return FilterResult(
            approved=False,
            reason=f"Contains inappropriate content: {', '.join(flagged)}",
            flagged_words=flagged,
        )
    return FilterResult(approved=True)


def is_topic_appropriate(topic: str) -> bool:
    return quick_filter(topic).approved
