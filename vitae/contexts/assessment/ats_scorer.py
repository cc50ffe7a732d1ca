"""
ATS Readiness Scoring

Computes a 0-100 readiness score from a fixed additive rubric. Each rule either
grants its points or contributes exactly one suggestion that restates the
missing condition and the points it would add. Suggestions keep rubric order;
callers showing only the first few must not re-sort them.

The rubric is deterministic: identical input always yields the identical score
and suggestion list.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Tuple

from vitae.contexts.authoring.resume_data_structure import Resume

MAX_SCORE = 100
MIN_SKILLS = 5
MIN_SUMMARY_CHARS = 50
MIN_EXPERIENCE_DESCRIPTION_CHARS = 10

# Badge thresholds
STRONG_SCORE = 70
GOOD_SCORE = 40

# Matched as case-insensitive substrings of the summary
SUMMARY_ACTION_VERBS = (
    "built",
    "led",
    "designed",
    "improved",
    "developed",
    "managed",
    "created",
    "implemented",
    "orchestrated",
    "engineered",
)


@dataclass(frozen=True)
class ScoringRule:
    """
    One rubric line.

    Attributes:
        name: Stable identifier for the rule
        points: Points granted when satisfied
        check: Predicate over the resume
        suggestion: Builds the suggestion text when the rule is not satisfied
    """

    name: str
    points: int
    check: Callable[[Resume], bool]
    suggestion: Callable[[Resume], str]


@dataclass
class ATSResult:
    """
    Score plus ordered improvement suggestions.

    Attributes:
        score: Sum of satisfied rule points, clamped to [0, 100]
        suggestions: One entry per unsatisfied rule, in rubric order
    """

    score: int
    suggestions: List[str] = field(default_factory=list)

    def top_suggestions(self, n: int = 3) -> List[str]:
        """First n suggestions in rubric order."""
        return self.suggestions[:n]

    @property
    def band(self) -> str:
        """Badge label for display: "Strong", "Good" or "Needs Work"."""
        if self.score >= STRONG_SCORE:
            return "Strong"
        if self.score >= GOOD_SCORE:
            return "Good"
        return "Needs Work"


def _summary_has_action_verb(resume: Resume) -> bool:
    summary = resume.summary.lower()
    return any(verb in summary for verb in SUMMARY_ACTION_VERBS)


def _has_detailed_experience(resume: Resume) -> bool:
    return any(
        len(entry.description.strip()) > MIN_EXPERIENCE_DESCRIPTION_CHARS
        for entry in resume.experience
    )


RUBRIC: Tuple[ScoringRule, ...] = (
    ScoringRule(
        "name", 10,
        lambda r: bool(r.name.strip()),
        lambda r: "Add your full name (+10)",
    ),
    ScoringRule(
        "email", 10,
        lambda r: bool(r.email.strip()),
        lambda r: "Add a professional email (+10)",
    ),
    ScoringRule(
        "summary_length", 10,
        lambda r: len(r.summary.strip()) > MIN_SUMMARY_CHARS,
        lambda r: f"Expand summary to > {MIN_SUMMARY_CHARS} characters (+10)",
    ),
    ScoringRule(
        "summary_action_verbs", 10,
        _summary_has_action_verb,
        lambda r: (
            "Use strong action verbs in summary "
            f'(e.g., "{", ".join(SUMMARY_ACTION_VERBS[:3])}") (+10)'
        ),
    ),
    ScoringRule(
        "experience", 15,
        _has_detailed_experience,
        lambda r: "Add at least 1 detailed experience entry (+15)",
    ),
    ScoringRule(
        "education", 10,
        lambda r: len(r.education) > 0,
        lambda r: "Add education details (+10)",
    ),
    ScoringRule(
        "skills", 10,
        lambda r: r.skills.total() >= MIN_SKILLS,
        lambda r: f"Add more skills (need {MIN_SKILLS}+, have {r.skills.total()}) (+10)",
    ),
    ScoringRule(
        "projects", 10,
        lambda r: len(r.projects) > 0,
        lambda r: "List at least 1 project (+10)",
    ),
    ScoringRule(
        "phone", 5,
        lambda r: bool(r.phone.strip()),
        lambda r: "Add a phone number (+5)",
    ),
    ScoringRule(
        "linkedin", 5,
        lambda r: bool(r.linkedin.strip()),
        lambda r: "Add LinkedIn profile (+5)",
    ),
    ScoringRule(
        "github", 5,
        lambda r: bool(r.github.strip()),
        lambda r: "Add GitHub profile (+5)",
    ),
)


def compute_ats_score(resume: Resume) -> ATSResult:
    """
    Score a resume against the rubric.

    Args:
        resume: Complete resume record (empty fields count as unmet conditions)

    Returns:
        ATSResult with the clamped score and ordered suggestions

    Example:
        >>> result = compute_ats_score(Resume(name="Ada", email="ada@example.com"))
        >>> result.score
        20
        >>> len(result.suggestions)
        9
    """
    score = 0
    suggestions = []

    for rule in RUBRIC:
        if rule.check(resume):
            score += rule.points
        else:
            suggestions.append(rule.suggestion(resume))

    return ATSResult(score=max(0, min(score, MAX_SCORE)), suggestions=suggestions)
