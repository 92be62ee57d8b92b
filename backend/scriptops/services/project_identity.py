"""Project Identity — resolves the cloud project id or fails with MissingProjectError.

Invariants:
    - Resolved once per call; nothing cached between calls
    - A non-empty id from the provider is returned unchanged
    - Empty/None after the provider's setup flow → MissingProjectError
"""

import logging

from scriptops.core.boundary_protocols import ProjectIdProvider
from scriptops.core.domain_types import ProjectId
from scriptops.core.errors import MissingProjectError

logger = logging.getLogger(__name__)


class ProjectIdentityResolver:
    """Wraps a ProjectIdProvider with the "or die" contract."""

    def __init__(self, provider: ProjectIdProvider, project_file: str = ".clasp.json"):
        self.provider = provider
        self.project_file = project_file

    async def resolve(self) -> ProjectId:
        project_id = await self.provider.get_project_id()  # may prompt the user
        if project_id:
            logger.debug("Resolved project id", extra={"project_id": project_id})
            return ProjectId(project_id)
        raise MissingProjectError(self.project_file)
