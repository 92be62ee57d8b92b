"""Manifest Advanced Services — pure transform of `dependencies.enabledAdvancedServices`.

Invariants:
    - Pure function: returns a new manifest dict, input never mutated
    - At most one entry per serviceId after the transform
    - Disable removes the entry; enable replaces it with the known declaration
    - Keys other than dependencies.enabledAdvancedServices are untouched
    - Unknown service on enable: no entry written (caller decides how to report)
"""

import copy
from dataclasses import dataclass


@dataclass(frozen=True)
class AdvancedService:
    """Manifest declaration for one public advanced service."""
    service_id: str
    user_symbol: str
    version: str

    def to_manifest_entry(self) -> dict:
        return {
            "userSymbol": self.user_symbol,
            "serviceId": self.service_id,
            "version": self.version,
        }


PUBLIC_ADVANCED_SERVICES: dict[str, AdvancedService] = {
    s.service_id: s
    for s in (
        AdvancedService("adsense", "AdSense", "v1.4"),
        AdvancedService("analytics", "Analytics", "v3"),
        AdvancedService("analyticsreporting", "AnalyticsReporting", "v4"),
        AdvancedService("bigquery", "BigQuery", "v2"),
        AdvancedService("calendar", "Calendar", "v3"),
        AdvancedService("classroom", "Classroom", "v1"),
        AdvancedService("content", "ShoppingContent", "v2.1"),
        AdvancedService("docs", "Docs", "v1"),
        AdvancedService("drive", "Drive", "v2"),
        AdvancedService("driveactivity", "DriveActivity", "v2"),
        AdvancedService("gmail", "Gmail", "v1"),
        AdvancedService("groupsmigration", "AdminGroupsMigration", "v1"),
        AdvancedService("licensing", "AdminLicenseManager", "v1"),
        AdvancedService("people", "People", "v1"),
        AdvancedService("sheets", "Sheets", "v4"),
        AdvancedService("slides", "Slides", "v1"),
        AdvancedService("tagmanager", "TagManager", "v2"),
        AdvancedService("tasks", "Tasks", "v1"),
        AdvancedService("youtube", "YouTube", "v3"),
        AdvancedService("youtubeAnalytics", "YouTubeAnalytics", "v2"),
    )
}


def find_advanced_service(service_id: str) -> AdvancedService | None:
    return PUBLIC_ADVANCED_SERVICES.get(service_id)


def set_advanced_service(manifest: dict, service_id: str, enable: bool) -> dict:
    """Return a copy of the manifest with service_id declared (enable) or removed."""
    updated = copy.deepcopy(manifest)
    dependencies = updated.get("dependencies") or {}
    updated["dependencies"] = dependencies
    current = dependencies.get("enabledAdvancedServices") or []

    services = [s for s in current if s.get("serviceId") != service_id]
    if enable:
        known = find_advanced_service(service_id)
        if known is not None:
            services.append(known.to_manifest_entry())

    dependencies["enabledAdvancedServices"] = services
    return updated


def enabled_service_ids(manifest: dict) -> list[str]:
    """serviceIds currently declared in the manifest, in file order."""
    dependencies = manifest.get("dependencies") or {}
    return [
        s.get("serviceId")
        for s in dependencies.get("enabledAdvancedServices") or []
        if s.get("serviceId")
    ]
