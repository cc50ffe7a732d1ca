"""
Shared utilities for VITAE.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Small text helpers
"""

from vitae.utils.text_processing import as_text, join_present, split_comma_list

__all__ = ["as_text", "join_present", "split_comma_list"]
