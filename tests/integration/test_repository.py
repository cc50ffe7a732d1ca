"""
Integration tests for resume persistence.

Tests ResumeRepository load/save/clear against both the in-memory and the
SQLite store, including recovery from malformed and legacy records.
"""

import json
from pathlib import Path

import pytest
from omegaconf import OmegaConf

from vitae.contexts.authoring import ContentHashIdGenerator, Resume, empty_resume, sample_resume
from vitae.contexts.persistence import RESUME_KEY, MemoryStore, ResumeRepository, SqliteStore

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


def _fixture_json(name: str) -> str:
    return json.dumps(OmegaConf.to_container(OmegaConf.load(FIXTURES_PATH / name), resolve=True))


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    if request.param == "memory":
        yield MemoryStore()
    else:
        with SqliteStore(tmp_path / "store.sqlite3") as sqlite_store:
            yield sqlite_store


@pytest.mark.integration
class TestLoadSave:
    """Round trips through each store."""

    def test_missing_record_loads_empty(self, store):
        assert ResumeRepository(store).load() == empty_resume()

    def test_save_then_load(self, store):
        repository = ResumeRepository(store)
        resume = sample_resume()
        repository.save(resume)
        assert repository.load() == resume

    def test_saved_record_is_camel_case_json(self, store):
        ResumeRepository(store).save(sample_resume())
        stored = json.loads(store.get(RESUME_KEY))
        assert stored["projects"][0]["techStack"] == ["React", "Node.js", "WebSocket", "Monaco Editor"]
        assert stored["education"][0]["startYear"] == "2019"

    def test_save_overwrites_whole_record(self, store):
        repository = ResumeRepository(store)
        repository.save(sample_resume())
        repository.save(Resume(name="Ada"))
        assert repository.load() == Resume(name="Ada")

    def test_clear_erases_record(self, store):
        repository = ResumeRepository(store)
        repository.save(sample_resume())
        repository.clear()
        assert RESUME_KEY not in store
        assert repository.load() == empty_resume()

    def test_non_ascii_text_preserved(self, store):
        repository = ResumeRepository(store)
        repository.save(Resume(name="José Müller", location="Zürich"))
        assert repository.load().name == "José Müller"
        assert "Zürich" in store.get(RESUME_KEY)

    def test_custom_key(self, store):
        ResumeRepository(store, key="draft").save(Resume(name="Ada"))
        assert RESUME_KEY not in store
        assert ResumeRepository(store, key="draft").load().name == "Ada"


@pytest.mark.integration
class TestRecovery:
    """Malformed and legacy stored records."""

    @pytest.mark.parametrize("raw", ["{not json", "", "[1, 2, 3]", '"just a string"', "null", "42"])
    def test_unusable_record_loads_empty(self, store, raw):
        store.set(RESUME_KEY, raw)
        assert ResumeRepository(store).load() == empty_resume()

    def test_partial_record_fills_defaults(self, store):
        store.set(RESUME_KEY, _fixture_json("partial_resume.yaml"))
        resume = ResumeRepository(store).load()
        assert resume.name == "Priya Raman"
        assert resume.experience[0].company == "Acme"
        assert resume.experience[0].description == ""
        assert resume.projects == []

    def test_legacy_skills_string_migrated(self, store):
        store.set(RESUME_KEY, _fixture_json("legacy_skills_string.yaml"))
        resume = ResumeRepository(store).load()
        assert resume.skills.technical == ["Python", "SQL", "Docker"]
        assert resume.skills.soft == resume.skills.tools == []

    def test_legacy_projects_migrated_with_stable_ids(self, store):
        store.set(RESUME_KEY, _fixture_json("legacy_projects.yaml"))
        repository = ResumeRepository(store)

        first = repository.load()
        second = repository.load()

        assert [p.id for p in first.projects] == ["p1", "keep-me", "p2"]
        assert first == second
        assert first.projects[0].tech_stack == ["Flask", "Redis", "Celery"]
        assert first.projects[0].live_url == "https://trips.example.com"

    def test_migration_persists_after_save(self, store):
        store.set(RESUME_KEY, _fixture_json("legacy_projects.yaml"))
        repository = ResumeRepository(store)
        repository.save(repository.load())

        stored = json.loads(store.get(RESUME_KEY))
        assert "name" not in stored["projects"][0]
        assert stored["projects"][0]["title"] == "Trip Planner"

    def test_injected_id_generator(self, store):
        store.set(RESUME_KEY, _fixture_json("legacy_projects.yaml"))
        resume = ResumeRepository(store, id_generator=ContentHashIdGenerator(length=8)).load()
        minted = [p.id for p in resume.projects if p.id != "keep-me"]
        assert len(minted) == 2
        assert all(len(project_id) == 8 for project_id in minted)


@pytest.mark.integration
def test_sqlite_store_persists_across_connections(tmp_path):
    """A record written by one connection is read back by the next."""
    db_path = tmp_path / "nested" / "store.sqlite3"

    with SqliteStore(db_path) as store:
        ResumeRepository(store).save(sample_resume())

    with SqliteStore(str(db_path)) as store:
        assert ResumeRepository(store).load().name == "Arjun Mehta"
