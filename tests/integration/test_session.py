"""
Integration tests for the editing session.

Tests ResumeSession autosave, sample/clear actions and analytics on the
current record.
"""

import pytest

from vitae.contexts.authoring import Resume, empty_resume
from vitae.contexts.persistence import MemoryStore, ResumeRepository, ResumeSession

pytestmark = pytest.mark.integration


@pytest.fixture
def repository():
    return ResumeRepository(MemoryStore())


def test_new_session_starts_empty(repository):
    assert ResumeSession(repository).resume == empty_resume()


def test_edit_autosaves(repository):
    session = ResumeSession(repository)
    with session.edit() as resume:
        resume.name = "Ada Lovelace"
        resume.skills.add("technical", "Mathematics")

    reloaded = ResumeSession(repository).resume
    assert reloaded.name == "Ada Lovelace"
    assert reloaded.skills.technical == ["Mathematics"]


def test_failed_edit_is_not_saved(repository):
    session = ResumeSession(repository)
    with pytest.raises(RuntimeError):
        with session.edit() as resume:
            resume.name = "Half-finished"
            raise RuntimeError("boom")

    assert repository.load().name == ""


def test_project_ids_stay_unique_across_edits(repository):
    session = ResumeSession(repository)
    with session.edit() as resume:
        resume.add_project(title="One")
        resume.add_project(title="Two")
    with session.edit() as resume:
        resume.remove_project("p2")
        resume.add_project(title="Three")

    assert [p.id for p in repository.load().projects] == ["p1", "p3"]


def test_project_ids_not_reissued_after_reload(repository):
    with ResumeSession(repository).edit() as resume:
        resume.add_project(title="One")
        resume.add_project(title="Two")

    with ResumeSession(repository).edit() as resume:
        resume.remove_project("p2")
        resume.add_project(title="Three")

    projects = repository.load().projects
    assert [(p.id, p.title) for p in projects] == [("p1", "One"), ("p3", "Three")]


def test_load_sample_replaces_and_persists(repository):
    session = ResumeSession(repository)
    session.replace(Resume(name="Ada"))

    sample = session.load_sample()

    assert sample.name == "Arjun Mehta"
    assert repository.load() == sample


def test_clear_resets_and_erases(repository):
    session = ResumeSession(repository)
    session.load_sample()

    assert session.clear() == empty_resume()
    assert repository.store.get(repository.key) is None


def test_analytics_follow_current_record(repository):
    session = ResumeSession(repository)
    assert session.score().score == 0
    assert not session.validate().is_valid

    session.load_sample()

    assert session.score().score == 90
    assert session.validate().is_valid
    assert session.tips() == ["Expand your professional summary to 40–120 words."]
