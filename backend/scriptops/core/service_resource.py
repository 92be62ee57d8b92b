"""Service Resource Names — validation and construction of registry resource names.

Invariants:
    - Pure functions: no IO, no async
    - A blank or whitespace-only service name is never turned into a resource name
    - Output shape: projects/{project_id}/services/{service_name}.{registry_domain}
"""

from scriptops.core.domain_types import ProjectId, ServiceResourceName
from scriptops.core.errors import ErrorContext, InvalidServiceNameError

DEFAULT_REGISTRY_DOMAIN = "googleapis.com"
APPS_SCRIPT_SERVICE = "script"


def validate_service_name(service_name: str | None) -> str:
    """Return the service name, or raise InvalidServiceNameError when blank."""
    if not service_name or not service_name.strip():
        raise InvalidServiceNameError()
    return service_name


def build_service_resource_name(
    project_id: ProjectId,
    service_name: str,
    registry_domain: str = DEFAULT_REGISTRY_DOMAIN,
) -> ServiceResourceName:
    if not project_id:
        raise ValueError("project_id must be non-empty")
    validate_service_name(service_name)
    return ServiceResourceName(
        f"projects/{project_id}/services/{service_name}.{registry_domain}"
    )


def error_context_for(
    service_name: str, project_id: str | None = None,
) -> ErrorContext:
    """ErrorContext pre-filled with the toggle's identifying fields."""
    return ErrorContext(project_id=project_id, service_name=service_name)
