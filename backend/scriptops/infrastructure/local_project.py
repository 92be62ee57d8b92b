"""Local Project — `.clasp.json` access and the interactive project-id setup flow.

Invariants:
    - Missing or invalid `.clasp.json` → ProjectSettingsError
    - Writing back preserves keys this tool does not model
    - ClaspProjectIdProvider prompts only when no projectId is stored; a blank answer
      yields None (the resolver turns that into MissingProjectError)
    - manifest_path() = directory of `.clasp.json` / rootDir / appsscript.json
"""

import json
import logging
from collections.abc import Callable
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.prompt import Prompt

from scriptops.core.errors import ProjectSettingsError
from scriptops.schemas.local_files import ProjectSettings

logger = logging.getLogger(__name__)

MANIFEST_FILE_NAME = "appsscript.json"

_PROJECT_ID_GUIDANCE = (
    "[bold]No Google Cloud project is linked to this script.[/bold]\n"
    "  1. Open the script in the Apps Script editor.\n"
    "  2. Go to Project Settings → Google Cloud Platform (GCP) Project.\n"
    "  3. Link a standard GCP project and copy its [cyan]project ID[/cyan]."
)


class ClaspProjectFile:
    """Reads and writes `.clasp.json`."""

    def __init__(self, path: Path):
        self.path = path

    def read(self) -> ProjectSettings:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise ProjectSettingsError(
                f"Project settings not found: {self.path}", str(self.path),
            )
        except (OSError, json.JSONDecodeError) as e:
            raise ProjectSettingsError(
                f"Could not read {self.path}: {e}", str(self.path),
            ) from e
        try:
            return ProjectSettings.model_validate(raw)
        except ValidationError as e:
            raise ProjectSettingsError(
                f"Invalid project settings in {self.path}", str(self.path),
            ) from e

    def write(self, settings: ProjectSettings) -> None:
        self.path.write_text(
            json.dumps(settings.to_file_dict(), indent=2) + "\n", encoding="utf-8",
        )

    def manifest_path(self) -> Path:
        root_dir = self.read().root_dir or ""
        return self.path.parent / root_dir / MANIFEST_FILE_NAME


class ClaspProjectIdProvider:
    """ProjectIdProvider backed by `.clasp.json`, with an interactive fallback."""

    def __init__(
        self,
        project_file: ClaspProjectFile,
        console: Console,
        ask: Callable[[str], str] | None = None,
    ):
        self.project_file = project_file
        self.console = console
        self.ask = ask or (lambda label: Prompt.ask(label, console=console, default=""))

    async def get_project_id(self) -> str | None:
        settings = self.project_file.read()
        if settings.project_id:
            return settings.project_id

        self.console.print(_PROJECT_ID_GUIDANCE)
        answer = (self.ask("Project ID") or "").strip()
        if not answer:
            return None

        settings.project_id = answer
        self.project_file.write(settings)
        logger.info(
            f"Saved projectId to {self.project_file.path}",
            extra={"project_id": answer},
        )
        return answer
