"""
Persistence Context

Responsibilities:
- Stores the resume record and presentation preferences in a key-value store
- Migrates records written by older builder versions on every load
- Recovers from missing or malformed stored data with documented defaults

Owns: Store layout, migration steps, the autosaving editing session
Never: Computes scores or renders output
"""

from vitae.contexts.persistence.migrations import MIGRATIONS, migrate, migrate_with_report
from vitae.contexts.persistence.preferences import (
    DEFAULT_TEMPLATE,
    DEFAULT_THEME_COLOR,
    THEME_COLORS,
    PreferencesRepository,
    TemplateName,
)
from vitae.contexts.persistence.repository import RESUME_KEY, ResumeRepository
from vitae.contexts.persistence.session import ResumeSession
from vitae.contexts.persistence.store import KeyValueStore, MemoryStore, SqliteStore

__all__ = [
    # Stores
    "KeyValueStore",
    "MemoryStore",
    "SqliteStore",
    # Resume record
    "ResumeRepository",
    "RESUME_KEY",
    "ResumeSession",
    # Migrations
    "MIGRATIONS",
    "migrate",
    "migrate_with_report",
    # Preferences
    "PreferencesRepository",
    "TemplateName",
    "THEME_COLORS",
    "DEFAULT_TEMPLATE",
    "DEFAULT_THEME_COLOR",
]
