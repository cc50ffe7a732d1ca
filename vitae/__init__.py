"""
VITAE - Verified Interview-Targeted Application Editor

A local resume builder core: a structured resume record plus the deterministic
analytics computed from it.

Architecture:
- Authoring Context: Resume data model, sample record, edit operations
- Persistence Context: Key-value storage, schema migration, preferences
- Assessment Context: ATS readiness score, bullet advice, structural validation
- Export Context: Plain-text serialization behind a validation gate
"""

__version__ = "0.1.0"
