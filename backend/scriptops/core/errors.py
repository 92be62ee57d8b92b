"""Error Hierarchy — typed, categorized exceptions for all scriptops failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the process exit code the CLI uses when it surfaces
    - to_response() produces the JSON envelope printed by `--log-format json` runs
    - User-facing messages never include the detail of a reclassified cause

Design Decisions:
    - Single hierarchy with ScriptOpsError base: the toggle orchestrator passes
      these through unchanged and reclassifies everything else
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and CLI rendering."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    AUTHENTICATION = "authentication"
    EXTERNAL_API = "external_api"
    LOCAL_FILE = "local_file"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    project_id: str | None = None
    service_name: str | None = None
    script_id: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class ScriptOpsError(Exception):
    """Base exception for all recognized scriptops errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        exit_code: int = 1,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.exit_code = exit_code

    def to_response(self) -> dict:
        """Convert to the structured error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "project_id": self.context.project_id,
                    "service_name": self.context.service_name,
                    "script_id": self.context.script_id,
                },
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class MissingProjectError(ScriptOpsError):
    """No cloud project id configured, even after the setup prompt."""
    def __init__(self, project_file: str = ".clasp.json", context: ErrorContext | None = None):
        super().__init__(
            f"No projectId found in your {project_file} file.",
            "NO_GCLOUD_PROJECT", ErrorCategory.CONFIGURATION,
            ErrorSeverity.ERROR, context, 2,
        )
        self.project_file = project_file


class InvalidServiceNameError(ScriptOpsError):
    """Service name missing or blank."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An API name is required. Try sheets",
            "INVALID_SERVICE_NAME", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 2,
        )


class ApiToggleError(ScriptOpsError):
    """Remote enable/disable or manifest sync failed for an unrecognized reason."""
    def __init__(self, action: str, service_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.service_name = service_name
        super().__init__(
            f"API {service_name} doesn't exist. "
            f"Try 'scriptops apis {action} sheets'.",
            "NO_API", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, ctx, 1,
        )
        self.action = action
        self.service_name = service_name


# ─── Infrastructure Errors ──────────────────────────────────────

class RemoteFetchError(ScriptOpsError):
    """Apps Script content read returned a non-success status."""
    def __init__(
        self, status_text: str, status: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            status_text or f"Remote request failed with status {status}",
            "REMOTE_FETCH_FAILED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 1,
        )
        self.status_text = status_text
        self.status = status


class CredentialsError(ScriptOpsError):
    """Stored OAuth credentials missing, unreadable, or not refreshable."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CREDENTIALS_ERROR", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.CRITICAL, context, 3,
        )


class ProjectSettingsError(ScriptOpsError):
    """Local project settings file missing or invalid."""
    def __init__(self, message: str, path: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PROJECT_SETTINGS_ERROR", ErrorCategory.LOCAL_FILE,
            ErrorSeverity.ERROR, context, 2,
        )
        self.path = path


class ManifestError(ScriptOpsError):
    """Manifest file missing or not valid JSON."""
    def __init__(self, message: str, path: str, context: ErrorContext | None = None):
        super().__init__(
            message, "MANIFEST_ERROR", ErrorCategory.LOCAL_FILE,
            ErrorSeverity.ERROR, context, 2,
        )
        self.path = path
