"""
Resume Repository

Single entry point for reading and writing the persisted resume record.
Every other component works on an in-memory Resume passed as a parameter and
never touches the store directly.

Load never raises on bad data: a missing, unparsable or wrong-shaped record
yields the empty default, and legacy shapes are migrated before the Resume is
built.
"""

import json
from typing import Optional

from vitae.contexts.authoring.identifiers import IdGenerator, SequentialIdGenerator
from vitae.contexts.authoring.resume_data_structure import Resume, empty_resume
from vitae.contexts.persistence.logger import log_load_result
from vitae.contexts.persistence.migrations import migrate_with_report
from vitae.contexts.persistence.store import KeyValueStore

RESUME_KEY = "resumeBuilderData"


class ResumeRepository:
    """
    Load/save/clear the resume record in a key-value store.

    Attributes:
        store: Backing key-value store
        key: Store key holding the JSON record
        id_generator: Generator for ids of legacy projects that lack one. When
            None, a fresh SequentialIdGenerator is used per load so repeated
            loads of the same legacy record produce the same ids.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str = RESUME_KEY,
        id_generator: Optional[IdGenerator] = None,
    ):
        self.store = store
        self.key = key
        self.id_generator = id_generator

    def load(self) -> Resume:
        """
        Read, migrate and return the persisted resume.

        Returns:
            The stored Resume, or the empty default if nothing usable is stored
        """
        raw = self.store.get(self.key)
        if raw is None:
            log_load_result(self.key, "missing")
            return empty_resume()

        try:
            payload = json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            log_load_result(self.key, "unparsable")
            return empty_resume()

        if not isinstance(payload, dict):
            log_load_result(self.key, "wrong-shape")
            return empty_resume()

        id_generator = self.id_generator or SequentialIdGenerator()
        migrated, applied = migrate_with_report(payload, id_generator)
        log_load_result(self.key, "loaded", applied)
        return Resume.from_dict(migrated)

    def save(self, resume: Resume) -> None:
        """Overwrite the persisted record with the whole resume."""
        self.store.set(self.key, json.dumps(resume.to_dict(), ensure_ascii=False))

    def clear(self) -> None:
        """Delete the persisted record; a later load() returns the empty default."""
        self.store.delete(self.key)
