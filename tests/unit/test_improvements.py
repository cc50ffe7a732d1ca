"""
Unit tests for writing tips.

Tests vitae.contexts.assessment.improvements.improvement_tips priority order and cap.
"""

import pytest

from vitae.contexts.assessment.improvements import improvement_tips
from vitae.contexts.authoring import Experience, Project, Resume, SkillSet, sample_resume

pytestmark = pytest.mark.unit


class TestImprovementTips:
    """Capped writing tips in fixed priority order."""

    def test_empty_resume_gets_first_three(self):
        assert improvement_tips(Resume()) == [
            "Add at least 2 projects to showcase your work.",
            "Add measurable impact (numbers, %, etc.) in your descriptions.",
            "Expand your professional summary to 40–120 words.",
        ]

    def test_limit_expands_list(self):
        tips = improvement_tips(Resume(), limit=10)
        assert len(tips) == 5
        assert tips[-2:] == [
            "List at least 8 skills for broader keyword coverage.",
            "Add internship or project work experience.",
        ]

    def test_project_description_numbers_count(self):
        resume = Resume(projects=[Project(id="p1", description="Served 200 users")])
        tips = improvement_tips(resume, limit=10)
        assert "Add measurable impact (numbers, %, etc.) in your descriptions." not in tips

    def test_long_summary_and_many_skills_silence_their_tips(self):
        resume = Resume(
            summary=" ".join(["word"] * 40),
            skills=SkillSet(technical=[f"skill{i}" for i in range(8)]),
        )
        tips = improvement_tips(resume, limit=10)
        assert "Expand your professional summary to 40–120 words." not in tips
        assert "List at least 8 skills for broader keyword coverage." not in tips

    def test_sample_only_needs_longer_summary(self):
        # The sample summary is 29 words
        assert improvement_tips(sample_resume()) == ["Expand your professional summary to 40–120 words."]

    def test_experience_with_numbers_silences_two_tips(self):
        resume = Resume(experience=[Experience(company="Acme", description="Cut costs by 20%")])
        tips = improvement_tips(resume, limit=10)
        assert "Add measurable impact (numbers, %, etc.) in your descriptions." not in tips
        assert "Add internship or project work experience." not in tips
