"""Manifest Store — read/modify/write of `appsscript.json` advanced-service declarations.

Invariants:
    - Manifest located per call from `.clasp.json` (rootDir), not at construction
    - Missing or non-object manifest → ManifestError
    - The transform itself is core.manifest_services.set_advanced_service (pure)
    - Enabling a service with no known declaration writes nothing for it and warns
    - Output is 2-space indented JSON with a trailing newline
"""

import json
import logging
from pathlib import Path

from scriptops.core.errors import ManifestError
from scriptops.core.manifest_services import (
    enabled_service_ids,
    find_advanced_service,
    set_advanced_service,
)
from scriptops.infrastructure.local_project import ClaspProjectFile

logger = logging.getLogger(__name__)


class ManifestFile:
    def __init__(self, path: Path):
        self.path = path

    def read(self) -> dict:
        try:
            manifest = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise ManifestError(f"Manifest not found: {self.path}", str(self.path))
        except (OSError, json.JSONDecodeError) as e:
            raise ManifestError(f"Could not read manifest {self.path}: {e}", str(self.path)) from e
        if not isinstance(manifest, dict):
            raise ManifestError(f"Manifest {self.path} is not a JSON object", str(self.path))
        return manifest

    def write(self, manifest: dict) -> None:
        self.path.write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")


class ManifestServiceSynchronizer:
    """ManifestSynchronizer for the manifest of the linked `.clasp.json` project."""

    def __init__(self, project_file: ClaspProjectFile):
        self.project_file = project_file

    async def enable_or_disable_advanced_service(
        self, service_name: str, enable: bool,
    ) -> None:
        manifest_file = ManifestFile(self.project_file.manifest_path())
        if enable and find_advanced_service(service_name) is None:
            logger.warning(
                f"No advanced service declaration known for '{service_name}'",
                extra={"service_name": service_name, "path": str(manifest_file.path)},
            )
        manifest = manifest_file.read()
        updated = set_advanced_service(manifest, service_name, enable)
        manifest_file.write(updated)
        declared = ", ".join(enabled_service_ids(updated)) or "none"
        logger.info(
            f"Manifest updated: {service_name} {'enabled' if enable else 'disabled'}"
            f" (declared: {declared})",
            extra={"service_name": service_name, "path": str(manifest_file.path)},
        )
