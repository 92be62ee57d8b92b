"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ProjectId, ScriptId, ServiceResourceName wrap str — opaque, never parsed
    - FunctionCatalog is an ordered list; duplicates are meaningful
    - All valid actions encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: values double as CLI verbs and log fields
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProjectId = NewType("ProjectId", str)
ScriptId = NewType("ScriptId", str)


# ─── Value Types ─────────────────────────────────────────────────

ServiceResourceName = NewType("ServiceResourceName", str)   # projects/{id}/services/{svc}.{domain}
FunctionCatalog = list[str]


# ─── Enums ───────────────────────────────────────────────────────

class ToggleAction(str, Enum):
    """Requested registry state change for a service."""
    ENABLE = "enable"
    DISABLE = "disable"

    @classmethod
    def from_flag(cls, enable: bool) -> "ToggleAction":
        return cls.ENABLE if enable else cls.DISABLE

    @property
    def past_tense(self) -> str:
        return "Enabled" if self is ToggleAction.ENABLE else "Disabled"


class ServiceState(str, Enum):
    """Service Usage states reported by the registry."""
    ENABLED = "ENABLED"
    DISABLED = "DISABLED"
    STATE_UNSPECIFIED = "STATE_UNSPECIFIED"
