"""Boundary Protocols — contracts between core/services and the infrastructure shell.

Invariants:
    - services/ NEVER imports from infrastructure/ — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by main.py (or tests) via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no base class
    - Remote and file IO are async; the interactive prompt and presenter are sync
      because they block on the terminal anyway
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol


@dataclass
class RemoteResponse:
    """Status + body of a remote read, returned without raising on HTTP status."""
    status: int
    status_text: str
    data: dict = field(default_factory=dict)


FunctionSource = Callable[[str], list[str]]


class ScriptContentReader(Protocol):
    """Contract for reading a script project's content — implemented by shell."""
    async def get_content(self, script_id: str) -> RemoteResponse: ...


class ServiceRegistry(Protocol):
    """Contract for the remote service registry — implemented by shell."""
    async def enable(self, name: str) -> None: ...
    async def disable(self, name: str) -> None: ...
    async def get_state(self, name: str) -> str: ...


class ManifestSynchronizer(Protocol):
    """Contract for the local manifest's advanced-service declarations."""
    async def enable_or_disable_advanced_service(
        self, service_name: str, enable: bool,
    ) -> None: ...


class ProjectIdProvider(Protocol):
    """Returns the configured project id, running the setup flow when absent."""
    async def get_project_id(self) -> str | None: ...


class CredentialLoader(Protocol):
    async def load_credentials(self) -> None: ...


class FunctionPrompt(Protocol):
    """Interactive chooser driven by a live-filter source."""
    def choose(self, source: FunctionSource) -> str: ...


class Presenter(Protocol):
    """Progress indicator and line output — purely observational."""
    def start_spinner(self, text: str) -> None: ...
    def stop_spinner(self) -> None: ...
    def info(self, message: str) -> None: ...
