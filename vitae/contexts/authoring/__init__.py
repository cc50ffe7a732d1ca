"""
Authoring Context

Responsibilities:
- Defines the resume record (Resume, Education, Experience, Project, SkillSet)
- Provides the empty default and the fixed sample record
- Owns edit operations that carry invariants (skill dedupe, project ids)

Owns: Resume data model, project identity
Never: Reads or writes persisted state
"""

from vitae.contexts.authoring.exceptions import (
    DuplicateProjectIdError,
    ProjectNotFoundError,
    UnknownSkillBucketError,
)
from vitae.contexts.authoring.identifiers import (
    ContentHashIdGenerator,
    IdGenerator,
    SequentialIdGenerator,
)
from vitae.contexts.authoring.resume_data_structure import (
    DEFAULT_SKILL_SUGGESTIONS,
    SKILL_BUCKETS,
    Education,
    Experience,
    Project,
    Resume,
    SkillSet,
    empty_resume,
)
from vitae.contexts.authoring.sample import sample_resume

__all__ = [
    # Data model
    "Resume",
    "Education",
    "Experience",
    "Project",
    "SkillSet",
    "SKILL_BUCKETS",
    "DEFAULT_SKILL_SUGGESTIONS",
    # Records
    "empty_resume",
    "sample_resume",
    # Identifiers
    "IdGenerator",
    "SequentialIdGenerator",
    "ContentHashIdGenerator",
    # Errors
    "UnknownSkillBucketError",
    "ProjectNotFoundError",
    "DuplicateProjectIdError",
]
