"""
Structural validation used to gate export actions.

The check is cheap and never blocks anything by itself: it reports warnings and
the caller decides whether to warn-and-allow or warn-and-confirm.
"""

from dataclasses import dataclass, field
from typing import List

from vitae.contexts.authoring.resume_data_structure import Resume

MISSING_NAME = "Missing name"
MISSING_CONTENT = "No projects or experience added"


@dataclass
class ValidationResult:
    """
    Result of structural validation.

    Attributes:
        is_valid: True iff no warnings were raised
        warnings: One entry per violated rule, in rule order
    """

    is_valid: bool
    warnings: List[str] = field(default_factory=list)


def validate_resume(resume: Resume) -> ValidationResult:
    """
    Check that a resume has the minimum structure worth exporting.

    Rules (all evaluated, no short-circuit):
    - name must be non-blank
    - at least one experience or project entry must exist
    """
    warnings = []

    if not resume.name.strip():
        warnings.append(MISSING_NAME)

    if not resume.experience and not resume.projects:
        warnings.append(MISSING_CONTENT)

    return ValidationResult(is_valid=not warnings, warnings=warnings)
