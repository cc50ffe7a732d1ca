"""
Unit tests for ATS readiness scoring.

Tests vitae.contexts.assessment.ats_scorer.
"""

import pytest

from vitae.contexts.assessment.ats_scorer import RUBRIC, ATSResult, compute_ats_score
from vitae.contexts.authoring import Education, Experience, Resume, SkillSet, sample_resume

pytestmark = pytest.mark.unit


def _complete_resume() -> Resume:
    """Resume satisfying every rubric rule."""
    return Resume(
        name="Ada Lovelace",
        email="ada@example.com",
        phone="+44 20 7946 0000",
        summary="Led the design of the first published algorithm for the Analytical Engine.",
        experience=[Experience(company="Babbage & Co", role="Analyst", description="Wrote notes A to G")],
        education=[Education(school="Private tutoring")],
        skills=SkillSet(technical=["Mathematics", "Algorithms", "Logic"], soft=["Writing"], tools=["Engine"]),
        github="https://github.com/ada",
        linkedin="https://linkedin.com/in/ada",
        projects=[],
    )


@pytest.fixture
def complete_resume():
    resume = _complete_resume()
    resume.add_project(title="Note G")
    return resume


def test_rubric_points_total_100():
    assert sum(rule.points for rule in RUBRIC) == 100


def test_empty_resume_scores_zero_with_every_suggestion():
    result = compute_ats_score(Resume())
    assert result.score == 0
    assert len(result.suggestions) == len(RUBRIC) == 11


def test_name_and_email_only():
    result = compute_ats_score(Resume(name="Ada", email="ada@example.com"))

    assert result.score == 20
    assert result.suggestions == [
        "Expand summary to > 50 characters (+10)",
        'Use strong action verbs in summary (e.g., "built, led, designed") (+10)',
        "Add at least 1 detailed experience entry (+15)",
        "Add education details (+10)",
        "Add more skills (need 5+, have 0) (+10)",
        "List at least 1 project (+10)",
        "Add a phone number (+5)",
        "Add LinkedIn profile (+5)",
        "Add GitHub profile (+5)",
    ]


def test_complete_resume_scores_100(complete_resume):
    result = compute_ats_score(complete_resume)
    assert result.score == 100
    assert result.suggestions == []


def test_sample_resume_misses_only_summary_verb():
    # The sample summary says "building"/"creating", not any rubric verb
    result = compute_ats_score(sample_resume())
    assert result.score == 90
    assert result.suggestions == ['Use strong action verbs in summary (e.g., "built, led, designed") (+10)']


@pytest.mark.parametrize(
    "attribute, blank_value, lost_points",
    [
        ("name", "  ", 10),
        ("email", "", 10),
        ("experience", [], 15),
        ("education", [], 10),
        ("projects", [], 10),
        ("phone", "", 5),
        ("linkedin", "", 5),
        ("github", "\t", 5),
    ],
)
def test_each_rule_contributes_independently(complete_resume, attribute, blank_value, lost_points):
    setattr(complete_resume, attribute, blank_value)
    result = compute_ats_score(complete_resume)

    assert result.score == 100 - lost_points
    assert len(result.suggestions) == 1
    assert f"(+{lost_points})" in result.suggestions[0]


class TestSummaryRules:
    """Summary length and action-verb rules."""

    def test_length_boundary(self, complete_resume):
        complete_resume.summary = "led " + "x" * 46  # exactly 50 characters
        assert compute_ats_score(complete_resume).score == 90

        complete_resume.summary = "led " + "x" * 47
        assert compute_ats_score(complete_resume).score == 100

    def test_length_is_measured_after_trimming(self, complete_resume):
        complete_resume.summary = "   led " + "x" * 46 + "    "
        assert "Expand summary to > 50 characters (+10)" in compute_ats_score(complete_resume).suggestions

    def test_verb_is_case_insensitive_substring(self, complete_resume):
        complete_resume.summary = "ORCHESTRATED releases across a large and demanding platform team."
        assert compute_ats_score(complete_resume).score == 100


class TestExperienceAndSkills:
    """Detailed experience and skill count rules."""

    def test_short_description_does_not_count(self, complete_resume):
        complete_resume.experience = [Experience(description="  too short ")]
        result = compute_ats_score(complete_resume)
        assert result.suggestions == ["Add at least 1 detailed experience entry (+15)"]

    def test_any_detailed_entry_is_enough(self, complete_resume):
        complete_resume.experience = [Experience(), Experience(description="12345678901")]
        assert compute_ats_score(complete_resume).score == 100

    def test_skill_suggestion_reports_current_count(self, complete_resume):
        complete_resume.skills = SkillSet(technical=["a", "b"], soft=["a"], tools=["c"])
        result = compute_ats_score(complete_resume)
        assert result.suggestions == ["Add more skills (need 5+, have 4) (+10)"]

    def test_skills_counted_across_buckets(self, complete_resume):
        complete_resume.skills = SkillSet(technical=["a"], soft=["a", "b"], tools=["c", "d"])
        assert compute_ats_score(complete_resume).score == 100


class TestResult:
    """ATSResult helpers and determinism."""

    def test_identical_input_identical_output(self, complete_resume):
        complete_resume.phone = ""
        assert compute_ats_score(complete_resume) == compute_ats_score(complete_resume)

    def test_top_suggestions_keep_rubric_order(self):
        result = compute_ats_score(Resume())
        assert result.top_suggestions(3) == result.suggestions[:3]
        assert result.top_suggestions(3)[0] == "Add your full name (+10)"

    @pytest.mark.parametrize(
        "score, band",
        [(100, "Strong"), (70, "Strong"), (69, "Good"), (40, "Good"), (39, "Needs Work"), (0, "Needs Work")],
    )
    def test_band(self, score, band):
        assert ATSResult(score=score).band == band
