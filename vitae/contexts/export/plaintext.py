"""
Plain-text export

Serializes a resume into a copyable, line-oriented document. Section order is
fixed; a section with no data is left out entirely (no empty headings). The
function is pure, so repeated calls on an unchanged resume return identical
text.

Layout:
    NAME

    email | phone | location

    github | linkedin

    SUMMARY
    -------
    ...
"""

from typing import List

from vitae.contexts.authoring.resume_data_structure import Education, Experience, Project, Resume
from vitae.utils.text_processing import join_present, underline

SKILL_LABELS = {
    "technical": "Technical",
    "soft": "Soft Skills",
    "tools": "Tools",
}


def _section(heading: str, body: List[str]) -> List[str]:
    return [heading, underline(heading), *body]


def format_experience(entry: Experience) -> List[str]:
    lines = [f"{entry.role} — {entry.company}"]
    if entry.start_date or entry.end_date:
        lines.append(f"{entry.start_date} to {entry.end_date}")
    if entry.description:
        lines.append(entry.description)
    lines.append("")
    return lines


def format_education(entry: Education) -> List[str]:
    lines = [join_present([entry.degree, entry.field], separator=" in ") or "Education Entry"]
    lines.append(entry.school)
    if entry.start_year or entry.end_year:
        lines.append(f"{entry.start_year} - {entry.end_year}")
    lines.append("")
    return lines


def format_project(project: Project) -> List[str]:
    lines = [project.title]
    if project.tech_stack:
        lines.append(f"Tech: {', '.join(project.tech_stack)}")
    if project.description:
        lines.append(project.description)
    if project.live_url:
        lines.append(f"Live: {project.live_url}")
    if project.github_url:
        lines.append(f"GitHub: {project.github_url}")
    lines.append("")
    return lines


def export_as_plain_text(resume: Resume) -> str:
    """
    Render a resume as plain text.

    Args:
        resume: Resume to serialize

    Returns:
        Document text with leading/trailing whitespace removed ("" for an empty resume)
    """
    lines: List[str] = []

    if resume.name:
        lines += [resume.name.upper(), ""]

    contact = join_present([resume.email, resume.phone, resume.location])
    if contact:
        lines += [contact, ""]

    links = join_present([resume.github, resume.linkedin])
    if links:
        lines += [links, ""]

    if resume.summary:
        lines += _section("SUMMARY", [resume.summary, ""])

    if resume.experience:
        lines += _section("EXPERIENCE", [line for entry in resume.experience for line in format_experience(entry)])

    if resume.education:
        lines += _section("EDUCATION", [line for entry in resume.education for line in format_education(entry)])

    if resume.projects:
        lines += _section("PROJECTS", [line for project in resume.projects for line in format_project(project)])

    if resume.skills.total():
        skill_lines = [
            f"{SKILL_LABELS[bucket]}: {', '.join(skills)}"
            for bucket, skills in resume.skills.buckets()
            if skills
        ]
        lines += _section("SKILLS", [*skill_lines, ""])

    return "\n".join(lines).strip()
