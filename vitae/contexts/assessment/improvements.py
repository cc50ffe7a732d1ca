"""
Writing tips shown beside the ATS score.

Unlike the rubric suggestions, these target content quality (quantified
impact, summary length, breadth of skills) and are capped to a short list.
"""

from typing import List

from vitae.contexts.assessment.bullet_advisor import has_number
from vitae.contexts.authoring.resume_data_structure import Resume

MIN_PROJECTS = 2
MIN_SUMMARY_WORDS = 40
MIN_SKILLS = 8


def improvement_tips(resume: Resume, limit: int = 3) -> List[str]:
    """
    Return up to limit tips, in fixed priority order.

    Args:
        resume: Resume to inspect
        limit: Maximum number of tips returned

    Returns:
        List of tip strings (empty when nothing applies)
    """
    tips = []

    if len(resume.projects) < MIN_PROJECTS:
        tips.append("Add at least 2 projects to showcase your work.")

    descriptions = [entry.description for entry in resume.experience]
    descriptions += [project.description for project in resume.projects]
    if not any(has_number(text) for text in descriptions):
        tips.append("Add measurable impact (numbers, %, etc.) in your descriptions.")

    if len(resume.summary.split()) < MIN_SUMMARY_WORDS:
        tips.append("Expand your professional summary to 40–120 words.")

    if resume.skills.total() < MIN_SKILLS:
        tips.append("List at least 8 skills for broader keyword coverage.")

    if not resume.experience:
        tips.append("Add internship or project work experience.")

    return tips[:limit]
