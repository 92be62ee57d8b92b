"""API Toggle — enable/disable a Google API in the registry and in the local manifest.

Invariants:
    - Blank service name → InvalidServiceNameError before any collaborator is called
    - Steps run strictly in order: validate → resolve project → registry → manifest → report
    - Manifest sync only runs after the registry call succeeded
    - Registry state is never rolled back when the manifest sync fails
    - ScriptOpsError subclasses propagate unchanged; any other error from the
      registry/manifest steps is logged and re-raised once as ApiToggleError
    - AppsScriptApiEnabler: credentials loaded first, fixed service, no manifest
      sync, no reclassification

Design Decisions:
    - Reclassification is a `match` on the exception type — known kinds pass, the
      rest map to the catch-all (the registry reports unknown APIs as 403)
    - Original error kept as __cause__ and in the log, never in the user message
"""

import logging

from scriptops.core.boundary_protocols import (
    CredentialLoader,
    ManifestSynchronizer,
    Presenter,
    ServiceRegistry,
)
from scriptops.core.domain_types import ServiceState, ToggleAction
from scriptops.core.errors import ApiToggleError, ScriptOpsError
from scriptops.core.service_resource import (
    APPS_SCRIPT_SERVICE,
    DEFAULT_REGISTRY_DOMAIN,
    build_service_resource_name,
    error_context_for,
    validate_service_name,
)
from scriptops.services.project_identity import ProjectIdentityResolver

logger = logging.getLogger(__name__)


class ApiToggleOrchestrator:
    """Keeps the service registry and the manifest in step for one service."""

    def __init__(
        self,
        resolver: ProjectIdentityResolver,
        registry: ServiceRegistry,
        manifest: ManifestSynchronizer,
        presenter: Presenter,
        registry_domain: str = DEFAULT_REGISTRY_DOMAIN,
    ):
        self.resolver = resolver
        self.registry = registry
        self.manifest = manifest
        self.presenter = presenter
        self.registry_domain = registry_domain

    async def toggle(self, service_name: str, enable: bool) -> None:
        validate_service_name(service_name)
        action = ToggleAction.from_flag(enable)
        project_id = await self.resolver.resolve()
        name = build_service_resource_name(
            project_id, service_name, self.registry_domain,
        )

        try:
            if enable:
                await self.registry.enable(name)
            else:
                await self.registry.disable(name)
            await self.manifest.enable_or_disable_advanced_service(service_name, enable)
        except Exception as e:
            match e:
                case ScriptOpsError():
                    raise
                case _:
                    logger.error(
                        f"Failed to {action.value} {name}: {e!r}",
                        exc_info=True,
                        extra={
                            "project_id": project_id,
                            "service_name": service_name,
                            "action": action.value,
                        },
                    )
                    raise ApiToggleError(
                        action.value, service_name,
                        context=error_context_for(service_name, project_id),
                    ) from e

        logger.info(
            f"{action.past_tense} {name}",
            extra={"project_id": project_id, "service_name": service_name},
        )
        self.presenter.info(f"{action.past_tense} {service_name} API.")

    async def is_enabled(self, service_name: str) -> bool:
        """True when the registry reports the service ENABLED for the project."""
        validate_service_name(service_name)
        project_id = await self.resolver.resolve()
        name = build_service_resource_name(
            project_id, service_name, self.registry_domain,
        )
        state = await self.registry.get_state(name)
        return state == ServiceState.ENABLED.value


class AppsScriptApiEnabler:
    """Bootstrap primitive: enable script.googleapis.com for the project."""

    def __init__(
        self,
        credentials: CredentialLoader,
        resolver: ProjectIdentityResolver,
        registry: ServiceRegistry,
        registry_domain: str = DEFAULT_REGISTRY_DOMAIN,
    ):
        self.credentials = credentials
        self.resolver = resolver
        self.registry = registry
        self.registry_domain = registry_domain

    async def enable(self) -> None:
        await self.credentials.load_credentials()
        project_id = await self.resolver.resolve()
        name = build_service_resource_name(
            project_id, APPS_SCRIPT_SERVICE, self.registry_domain,
        )
        await self.registry.enable(name)
        logger.info(f"Enabled {name}", extra={"project_id": project_id})
