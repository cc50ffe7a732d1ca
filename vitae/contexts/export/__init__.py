"""
Export Context

Responsibilities:
- Serializes a resume into a deterministic plain-text document
- Gates export behind structural validation with explicit confirmation

Owns: Plain-text layout, export confirmation policy
Never: Modifies the resume or its persisted copy
"""

from vitae.contexts.export.gate import INCOMPLETE_PROMPT, ExportOutcome, export_with_validation
from vitae.contexts.export.plaintext import export_as_plain_text

__all__ = [
    "export_as_plain_text",
    "export_with_validation",
    "ExportOutcome",
    "INCOMPLETE_PROMPT",
]
