"""
Unit tests for structural validation.

Tests vitae.contexts.assessment.validator.
"""

import pytest

from vitae.contexts.assessment.validator import MISSING_CONTENT, MISSING_NAME, validate_resume
from vitae.contexts.authoring import Experience, Project, Resume, sample_resume

pytestmark = pytest.mark.unit


class TestValidateResume:
    """Missing-name and missing-content rules."""

    def test_empty_resume_raises_both_warnings_in_order(self):
        result = validate_resume(Resume())
        assert result.is_valid is False
        assert result.warnings == [MISSING_NAME, MISSING_CONTENT]

    def test_blank_name_is_missing(self):
        result = validate_resume(Resume(name="   ", experience=[Experience()]))
        assert result.warnings == ["Missing name"]

    def test_one_project_is_enough_content(self):
        result = validate_resume(Resume(name="Ada", projects=[Project(id="p1")]))
        assert result.is_valid is True
        assert result.warnings == []

    def test_one_experience_is_enough_content(self):
        assert validate_resume(Resume(name="Ada", experience=[Experience()])).is_valid

    def test_name_without_content(self):
        result = validate_resume(Resume(name="Ada"))
        assert result.warnings == ["No projects or experience added"]

    def test_sample_is_valid(self):
        assert validate_resume(sample_resume()).is_valid
