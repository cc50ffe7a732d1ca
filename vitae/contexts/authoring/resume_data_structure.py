"""
Resume Data Structure

Defines the structured resume record edited by the builder and read by every
analytic (scoring, bullet advice, validation, export).

A Resume is always fully populated: absent input is an empty string or an
empty list, never a missing attribute. The persisted form is a JSON object
with camelCase keys (startYear, techStack, liveUrl, ...), produced by
to_dict() and read back by from_dict().
"""

import copy
from dataclasses import dataclass, field, fields as dataclass_fields
from typing import Any, ClassVar, Dict, Iterable, Iterator, List, Mapping, Optional, Set, Tuple

from vitae.contexts.authoring.exceptions import (
    DuplicateProjectIdError,
    ProjectNotFoundError,
    UnknownSkillBucketError,
)
from vitae.contexts.authoring.identifiers import IdGenerator, SequentialIdGenerator
from vitae.utils.text_processing import as_text

SKILL_BUCKETS = ("technical", "soft", "tools")

# Fixed lists offered by the "suggest skills" action
DEFAULT_SKILL_SUGGESTIONS = {
    "technical": ["TypeScript", "React", "Node.js", "PostgreSQL", "GraphQL"],
    "soft": ["Team Leadership", "Problem Solving"],
    "tools": ["Git", "Docker", "AWS"],
}


def _as_str_list(value: Any) -> List[str]:
    """Coerce a stored sequence to a list of strings, dropping items that are not text or numbers."""
    if not isinstance(value, list):
        return []
    return [as_text(item) for item in value if isinstance(item, str) or as_text(item)]


def _as_mapping_list(value: Any) -> List[Mapping[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, Mapping)]


class _FlatRecord:
    """
    Mixin for entries whose fields are all strings.

    JSON_KEYS maps attribute name -> persisted key, in persisted order.
    """

    JSON_KEYS: ClassVar[Dict[str, str]] = {}

    def to_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, attr) for attr, key in self.JSON_KEYS.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        return cls(**{attr: as_text(data.get(key)) for attr, key in cls.JSON_KEYS.items()})


@dataclass
class Education(_FlatRecord):
    """
    Education entry.

    Years are free-form strings; "2019", "Expected 2026" and "" are all valid.
    """

    school: str = ""
    degree: str = ""
    field: str = ""
    start_year: str = ""
    end_year: str = ""

    JSON_KEYS: ClassVar[Dict[str, str]] = {
        "school": "school",
        "degree": "degree",
        "field": "field",
        "start_year": "startYear",
        "end_year": "endYear",
    }


@dataclass
class Experience(_FlatRecord):
    """
    Work experience entry.

    Attributes:
        description: Free-text achievement line(s), the unit analyzed by the bullet advisor
    """

    company: str = ""
    role: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""

    JSON_KEYS: ClassVar[Dict[str, str]] = {
        "company": "company",
        "role": "role",
        "start_date": "startDate",
        "end_date": "endDate",
        "description": "description",
    }


@dataclass
class Project(_FlatRecord):
    """
    Project entry.

    Attributes:
        id: Unique, immutable identifier within the owning resume
        tech_stack: Technologies in user-entered order (duplicates allowed)
    """

    id: str = ""
    title: str = ""
    description: str = ""
    tech_stack: List[str] = field(default_factory=list)
    live_url: str = ""
    github_url: str = ""

    JSON_KEYS: ClassVar[Dict[str, str]] = {
        "id": "id",
        "title": "title",
        "description": "description",
        "live_url": "liveUrl",
        "github_url": "githubUrl",
    }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "techStack": list(self.tech_stack),
            "liveUrl": self.live_url,
            "githubUrl": self.github_url,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Project":
        project = super().from_dict(data)
        project.tech_stack = _as_str_list(data.get("techStack"))
        return project


@dataclass
class SkillSet:
    """
    Three fixed skill buckets, each holding distinct strings in insertion order.

    The same skill may appear in more than one bucket.
    """

    technical: List[str] = field(default_factory=list)
    soft: List[str] = field(default_factory=list)
    tools: List[str] = field(default_factory=list)

    def _bucket(self, bucket: str) -> List[str]:
        if bucket not in SKILL_BUCKETS:
            raise UnknownSkillBucketError(bucket, SKILL_BUCKETS)
        return getattr(self, bucket)

    def add(self, bucket: str, skill: str) -> bool:
        """
        Add a skill to a bucket.

        Args:
            bucket: One of "technical", "soft", "tools"
            skill: Skill text (surrounding whitespace is trimmed)

        Returns:
            True if added, False if the skill was blank or already in the bucket

        Raises:
            UnknownSkillBucketError: If bucket is not a known bucket
        """
        skills = self._bucket(bucket)
        skill = skill.strip()
        if not skill or skill in skills:
            return False
        skills.append(skill)
        return True

    def remove(self, bucket: str, skill: str) -> bool:
        """Remove a skill from a bucket. Returns False if it was not there."""
        skills = self._bucket(bucket)
        if skill not in skills:
            return False
        skills.remove(skill)
        return True

    def merge(self, suggestions: Optional[Mapping[str, Iterable[str]]] = None) -> int:
        """
        Add suggested skills that are not already present.

        Args:
            suggestions: bucket -> skills (defaults to DEFAULT_SKILL_SUGGESTIONS)

        Returns:
            Number of skills actually added
        """
        if suggestions is None:
            suggestions = DEFAULT_SKILL_SUGGESTIONS
        added = 0
        for bucket, skills in suggestions.items():
            for skill in skills:
                added += self.add(bucket, skill)
        return added

    def buckets(self) -> Iterator[Tuple[str, List[str]]]:
        """Yield (bucket_name, skills) in fixed bucket order."""
        for bucket in SKILL_BUCKETS:
            yield bucket, getattr(self, bucket)

    def total(self) -> int:
        """Total skill count across all buckets."""
        return sum(len(skills) for _, skills in self.buckets())

    def to_dict(self) -> Dict[str, List[str]]:
        return {bucket: list(skills) for bucket, skills in self.buckets()}

    @classmethod
    def from_dict(cls, data: Any) -> "SkillSet":
        if not isinstance(data, Mapping):
            return cls()
        # dict.fromkeys drops duplicates while keeping first-seen order
        return cls(
            **{bucket: list(dict.fromkeys(_as_str_list(data.get(bucket)))) for bucket in SKILL_BUCKETS}
        )


@dataclass
class Resume:
    """
    Root aggregate of the resume builder (one per user session).

    Attributes:
        name, email, phone, location, summary: Header and profile text
        education, experience, projects: Ordered entries (order = display order)
        skills: Three-bucket skill set
        github, linkedin: Profile URLs (unvalidated)
    """

    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    summary: str = ""
    education: List[Education] = field(default_factory=list)
    experience: List[Experience] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    skills: SkillSet = field(default_factory=SkillSet)
    github: str = ""
    linkedin: str = ""
    _id_generator: IdGenerator = field(
        default_factory=SequentialIdGenerator, repr=False, compare=False
    )

    _SCALAR_FIELDS: ClassVar[Tuple[str, ...]] = (
        "name",
        "email",
        "phone",
        "location",
        "summary",
        "github",
        "linkedin",
    )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the persisted JSON shape (camelCase keys, all fields present)."""
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "summary": self.summary,
            "education": [entry.to_dict() for entry in self.education],
            "experience": [entry.to_dict() for entry in self.experience],
            "projects": [project.to_dict() for project in self.projects],
            "skills": self.skills.to_dict(),
            "github": self.github,
            "linkedin": self.linkedin,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Resume":
        """
        Build a Resume from its persisted JSON shape.

        Missing keys take their empty default and wrong-typed values are coerced
        (numbers to their text, other non-string scalars to "", non-list
        sequences to []). Legacy shapes are NOT handled here; run persistence
        migrations first.

        The project id counter continues past the highest stored "p<N>" id.
        """
        resume = cls(
            **{name: as_text(data.get(name)) for name in cls._SCALAR_FIELDS},
            education=[Education.from_dict(item) for item in _as_mapping_list(data.get("education"))],
            experience=[Experience.from_dict(item) for item in _as_mapping_list(data.get("experience"))],
            projects=[Project.from_dict(item) for item in _as_mapping_list(data.get("projects"))],
            skills=SkillSet.from_dict(data.get("skills")),
        )
        resume._id_generator = SequentialIdGenerator.following(resume.project_ids())
        return resume

    def copy(self) -> "Resume":
        """Deep copy, used to hand analytics a stable snapshot."""
        return copy.deepcopy(self)

    # Project identity

    def project_ids(self) -> Set[str]:
        return {project.id for project in self.projects}

    def add_project(self, id_generator: Optional[IdGenerator] = None, **fields: Any) -> Project:
        """
        Append a new project with a freshly assigned id.

        Args:
            id_generator: Generator to mint the id (defaults to the resume's own counter)
            **fields: Project attributes (title, description, tech_stack, live_url, github_url).
                An explicit id is accepted only if it is not already in use.

        Returns:
            The created Project

        Raises:
            DuplicateProjectIdError: If an explicit id is already taken
        """
        taken = self.project_ids()
        project_id = fields.pop("id", "")
        if project_id:
            if project_id in taken:
                raise DuplicateProjectIdError(project_id)
        else:
            generator = id_generator or self._id_generator
            project_id = generator.next_id(fields, taken)

        project = Project(id=project_id, **fields)
        self.projects.append(project)
        return project

    def find_project(self, project_id: str) -> Project:
        """Raises ProjectNotFoundError if no project carries project_id."""
        for project in self.projects:
            if project.id == project_id:
                return project
        raise ProjectNotFoundError(project_id)

    def update_project(self, project_id: str, **changes: Any) -> Project:
        """
        Edit a project in place.

        Raises:
            ProjectNotFoundError: If project_id is unknown
            ValueError: If changes try to modify the id or name an unknown attribute
        """
        project = self.find_project(project_id)
        if "id" in changes and changes["id"] != project_id:
            raise ValueError("Project id is immutable once assigned")
        for attr, value in changes.items():
            if attr not in {f.name for f in dataclass_fields(Project)}:
                raise ValueError(f"Unknown project attribute: {attr}")
            setattr(project, attr, value)
        return project

    def remove_project(self, project_id: str) -> Project:
        """Remove and return a project. Raises ProjectNotFoundError if unknown."""
        project = self.find_project(project_id)
        self.projects.remove(project)
        return project


def empty_resume() -> Resume:
    """The all-empty default record."""
    return Resume()
