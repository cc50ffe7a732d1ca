"""
Stored-record migrations

Brings resume payloads written by older builder versions up to the current
shape before they are turned into a Resume. Stored records carry no version
number, so every step runs on every load and must be idempotent: running it on
an already-current payload changes nothing.

Steps (applied in order, each independent of the others):
1. migrate_skills_string: "a, b, c" skills string -> three-bucket mapping
2. migrate_legacy_projects: fill ids, rename name/tech/link to title/techStack/liveUrl

Each step takes a payload dict and returns a new dict; the input is never
modified in place.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Set, Tuple

from vitae.contexts.authoring.identifiers import IdGenerator, SequentialIdGenerator
from vitae.utils.text_processing import as_text, split_comma_list

Migration = Callable[[Dict[str, Any], IdGenerator], Dict[str, Any]]


def _text(entry: Mapping[str, Any], key: str) -> str:
    return as_text(entry.get(key))


def migrate_skills_string(payload: Dict[str, Any], id_generator: Optional[IdGenerator] = None) -> Dict[str, Any]:
    """
    Convert a legacy comma-delimited skills string into the bucket mapping.

    All tokens go to "technical"; "soft" and "tools" start empty.

    Example:
        {"skills": "Python, SQL, "} -> {"skills": {"technical": ["Python", "SQL"], "soft": [], "tools": []}}
    """
    skills = payload.get("skills")
    if not isinstance(skills, str):
        return dict(payload)

    migrated = dict(payload)
    migrated["skills"] = {
        "technical": split_comma_list(skills),
        "soft": [],
        "tools": [],
    }
    return migrated


def _migrate_project(entry: Mapping[str, Any], project_id: str) -> Dict[str, Any]:
    tech_stack = entry.get("techStack")
    if not isinstance(tech_stack, list):
        legacy_tech = _text(entry, "tech")
        tech_stack = split_comma_list(legacy_tech, drop_empty=False) if legacy_tech else []

    return {
        "id": project_id,
        "title": _text(entry, "title") or _text(entry, "name"),
        "description": _text(entry, "description"),
        "techStack": list(tech_stack),
        "liveUrl": _text(entry, "liveUrl") or _text(entry, "link"),
        "githubUrl": _text(entry, "githubUrl"),
    }


def migrate_legacy_projects(payload: Dict[str, Any], id_generator: Optional[IdGenerator] = None) -> Dict[str, Any]:
    """
    Normalize every stored project entry to the current project shape.

    - Missing or empty id: minted by id_generator (ids repeated within the
      record are re-minted for every occurrence after the first)
    - Missing title: legacy "name"
    - techStack not a list: legacy comma-delimited "tech" string
    - Missing liveUrl: legacy "link"
    - Any other missing field: ""

    Entries that are not mappings are dropped. Legacy keys are not carried over.

    Args:
        payload: Stored resume payload
        id_generator: Generator for missing ids (defaults to a fresh SequentialIdGenerator)
    """
    projects = payload.get("projects")
    if not isinstance(projects, list):
        return dict(payload)

    if id_generator is None:
        id_generator = SequentialIdGenerator()

    entries = [entry for entry in projects if isinstance(entry, Mapping)]
    taken: Set[str] = {_text(entry, "id") for entry in entries} - {""}
    seen: Set[str] = set()

    migrated_projects = []
    for entry in entries:
        project_id = _text(entry, "id")
        if not project_id or project_id in seen:
            project_id = id_generator.next_id(entry, taken)
            taken.add(project_id)
        seen.add(project_id)
        migrated_projects.append(_migrate_project(entry, project_id))

    migrated = dict(payload)
    migrated["projects"] = migrated_projects
    return migrated


# Ordered list of migration steps; append new steps at the end
MIGRATIONS: Tuple[Migration, ...] = (
    migrate_skills_string,
    migrate_legacy_projects,
)


def migrate_with_report(
    payload: Mapping[str, Any], id_generator: Optional[IdGenerator] = None
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Apply every migration step in order.

    Args:
        payload: Stored resume payload (any shape the builder ever wrote)
        id_generator: Generator for missing project ids

    Returns:
        Tuple of (migrated payload, names of the steps that changed something)
    """
    if id_generator is None:
        id_generator = SequentialIdGenerator()

    current = dict(payload)
    applied = []
    for step in MIGRATIONS:
        migrated = step(current, id_generator)
        if migrated != current:
            applied.append(step.__name__)
        current = migrated
    return current, applied


def migrate(payload: Mapping[str, Any], id_generator: Optional[IdGenerator] = None) -> Dict[str, Any]:
    """Apply every migration step in order and return the migrated payload."""
    migrated, _ = migrate_with_report(payload, id_generator)
    return migrated
