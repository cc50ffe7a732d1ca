"""
Validate-then-export gate.

An incomplete resume is exported only after an explicit confirmation.
Dismissing the warning without confirming cancels the export; it is never
silently retried or silently dropped.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from vitae.contexts.assessment.validator import validate_resume
from vitae.contexts.authoring.resume_data_structure import Resume
from vitae.contexts.export.logger import log_export_result
from vitae.contexts.export.plaintext import export_as_plain_text

INCOMPLETE_PROMPT = "Your resume may look incomplete. Review it or export anyway?"


@dataclass
class ExportOutcome:
    """
    Result of a gated export.

    Attributes:
        exported: True if the document was produced
        text: The plain-text document (None when not exported)
        warnings: Validation warnings, empty for a complete resume
    """

    exported: bool
    text: Optional[str] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def needs_confirmation(self) -> bool:
        """True when the export was held back pending confirmation."""
        return not self.exported and bool(self.warnings)


def export_with_validation(resume: Resume, confirm_incomplete: bool = False) -> ExportOutcome:
    """
    Validate a resume and export it if allowed.

    Args:
        resume: Resume to export
        confirm_incomplete: Caller has confirmed exporting despite warnings

    Returns:
        ExportOutcome; for an incomplete, unconfirmed resume exported is False
        and warnings explain why
    """
    validation = validate_resume(resume)

    if not validation.is_valid and not confirm_incomplete:
        log_export_result(False, validation.warnings, confirm_incomplete)
        return ExportOutcome(exported=False, warnings=validation.warnings)

    text = export_as_plain_text(resume)
    log_export_result(True, validation.warnings, confirm_incomplete, chars=len(text))
    return ExportOutcome(exported=True, text=text, warnings=validation.warnings)
