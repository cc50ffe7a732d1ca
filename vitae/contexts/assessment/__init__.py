"""
Assessment Context

Responsibilities:
- Scores resume readiness against a fixed, explainable rubric
- Advises on individual bullets (action verb, quantified impact)
- Validates minimum structure before export
- Produces short writing tips

Owns: Scoring rubric, bullet heuristics, validation rules
Never: Mutates the resume or touches persisted state
"""

from vitae.contexts.assessment.ats_scorer import RUBRIC, ATSResult, compute_ats_score
from vitae.contexts.assessment.bullet_advisor import ACTION_VERBS, BulletGuidance, analyze_bullet
from vitae.contexts.assessment.improvements import improvement_tips
from vitae.contexts.assessment.validator import ValidationResult, validate_resume

__all__ = [
    "compute_ats_score",
    "ATSResult",
    "RUBRIC",
    "analyze_bullet",
    "BulletGuidance",
    "ACTION_VERBS",
    "validate_resume",
    "ValidationResult",
    "improvement_tips",
]
