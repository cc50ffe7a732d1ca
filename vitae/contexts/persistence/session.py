"""
Resume editing session.

Models the single writer that owns the in-memory resume: it loads once,
persists the whole record after every edit, and offers read-only analytics on
the current snapshot.

Usage:
    session = ResumeSession(ResumeRepository(SqliteStore()))
    with session.edit() as resume:
        resume.name = "Ada Lovelace"
        resume.skills.add("technical", "Python")
    print(session.score().score)
"""

from contextlib import contextmanager
from typing import Iterator, List

from vitae.contexts.assessment.ats_scorer import ATSResult, compute_ats_score
from vitae.contexts.assessment.improvements import improvement_tips
from vitae.contexts.assessment.validator import ValidationResult, validate_resume
from vitae.contexts.authoring.resume_data_structure import Resume, empty_resume
from vitae.contexts.authoring.sample import sample_resume
from vitae.contexts.persistence.logger import _log_info
from vitae.contexts.persistence.repository import ResumeRepository


class ResumeSession:
    """
    Owner of the mutable resume for one user session.

    Attributes:
        repository: Where the record is persisted
        resume: Current in-memory record
    """

    def __init__(self, repository: ResumeRepository):
        self.repository = repository
        self.resume: Resume = repository.load()

    @contextmanager
    def edit(self) -> Iterator[Resume]:
        """
        Yield the resume for mutation and save it when the block exits cleanly.

        If the block raises, nothing is saved and the exception propagates.
        """
        yield self.resume
        self.repository.save(self.resume)

    def replace(self, resume: Resume) -> None:
        """Swap in a whole new record and persist it."""
        self.resume = resume
        self.repository.save(self.resume)

    def load_sample(self) -> Resume:
        """Replace the record with the fixed sample."""
        self.replace(sample_resume())
        _log_info("Loaded sample resume")
        return self.resume

    def clear(self) -> Resume:
        """Reset to the empty record and erase the persisted copy."""
        self.resume = empty_resume()
        self.repository.clear()
        _log_info("Cleared resume and erased persisted copy")
        return self.resume

    def score(self) -> ATSResult:
        return compute_ats_score(self.resume)

    def validate(self) -> ValidationResult:
        return validate_resume(self.resume)

    def tips(self, limit: int = 3) -> List[str]:
        return improvement_tips(self.resume, limit=limit)
