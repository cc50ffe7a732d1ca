"""
Bullet Advisor

Flags missing writing conventions in a single achievement line: it should open
with a strong action verb and quantify its impact. Advisory only; input is
never rejected.
"""

import re
from dataclasses import dataclass
from typing import List

ACTION_VERBS = frozenset(
    {
        "built", "developed", "designed", "implemented", "led", "improved",
        "created", "optimized", "automated", "managed", "launched", "delivered",
        "engineered", "deployed", "integrated", "refactored", "architected",
        "maintained", "established", "reduced", "increased", "streamlined",
        "migrated", "configured", "resolved", "collaborated", "contributed",
        "analyzed", "tested", "wrote", "shipped", "spearheaded", "mentored",
    }
)

# An integer with an optional %, k/K, x/X or + suffix, or any standalone 2+ digit number (ASCII digits only)
NUMBER_PATTERN = re.compile(r"\d+[%kKxX+]?|\b\d{2,}\b", re.ASCII)

VERB_HINT = "Start with a strong action verb."
NUMBER_HINT = "Add measurable impact (numbers)."


@dataclass(frozen=True)
class BulletGuidance:
    """
    Result of analyzing one bullet.

    Attributes:
        needs_verb: First word is not a recognized action verb
        needs_number: No quantitative token found
    """

    needs_verb: bool
    needs_number: bool

    @property
    def hints(self) -> List[str]:
        """User-facing hint strings, verb hint first."""
        hints = []
        if self.needs_verb:
            hints.append(VERB_HINT)
        if self.needs_number:
            hints.append(NUMBER_HINT)
        return hints


def has_number(text: str) -> bool:
    """True if text contains a quantitative token."""
    return NUMBER_PATTERN.search(text) is not None


def first_word(text: str) -> str:
    """First whitespace-delimited word, lower-cased, trailing .,;: stripped."""
    return text.split()[0].lower().rstrip(".,;:")


def analyze_bullet(text: str) -> BulletGuidance:
    """
    Analyze a single free-text line.

    Args:
        text: Experience or project description

    Returns:
        BulletGuidance; both flags are False for blank text

    Examples:
        >>> analyze_bullet("Built a pipeline processing 10k requests/day")
        BulletGuidance(needs_verb=False, needs_number=False)
        >>> analyze_bullet("Worked on stuff")
        BulletGuidance(needs_verb=True, needs_number=True)
    """
    trimmed = text.strip()
    if not trimmed:
        return BulletGuidance(needs_verb=False, needs_number=False)

    return BulletGuidance(
        needs_verb=first_word(trimmed) not in ACTION_VERBS,
        needs_number=not has_number(trimmed),
    )
