"""Protocol Fakes — in-memory stand-ins for every boundary protocol.

Invariants:
    - Every fake records calls into a shared, ordered `calls` log
    - Fakes fail on demand via their `error` attribute (raised on the next call)
    - No network, no files, no terminal

Design Decisions:
    - Flat fake classes (no inheritance from the Protocols): structural typing is enough
    - Shared call log makes step ordering assertions one-liners
"""

from scriptops.core.boundary_protocols import RemoteResponse


class FakeRegistry:
    def __init__(self, calls: list):
        self.calls = calls
        self.error: Exception | None = None
        self.state: dict[str, str] = {}

    async def enable(self, name: str) -> None:
        self.calls.append(("registry.enable", name))
        if self.error:
            raise self.error
        self.state[name] = "ENABLED"

    async def disable(self, name: str) -> None:
        self.calls.append(("registry.disable", name))
        if self.error:
            raise self.error
        self.state[name] = "DISABLED"

    async def get_state(self, name: str) -> str:
        self.calls.append(("registry.get_state", name))
        if self.error:
            raise self.error
        return self.state.get(name, "DISABLED")


class FakeManifest:
    def __init__(self, calls: list):
        self.calls = calls
        self.error: Exception | None = None
        self.services: dict[str, bool] = {}

    async def enable_or_disable_advanced_service(self, service_name: str, enable: bool) -> None:
        self.calls.append(("manifest.sync", service_name, enable))
        if self.error:
            raise self.error
        self.services[service_name] = enable


class FakeProjectIdProvider:
    def __init__(self, calls: list, project_id: str | None = "test-project"):
        self.calls = calls
        self.project_id = project_id

    async def get_project_id(self) -> str | None:
        self.calls.append(("project.get_project_id",))
        return self.project_id


class FakeCredentials:
    def __init__(self, calls: list):
        self.calls = calls

    async def load_credentials(self) -> None:
        self.calls.append(("credentials.load",))


class FakePresenter:
    def __init__(self, calls: list):
        self.calls = calls
        self.messages: list[str] = []

    def start_spinner(self, text: str) -> None:
        self.calls.append(("spinner.start", text))

    def stop_spinner(self) -> None:
        self.calls.append(("spinner.stop",))

    def info(self, message: str) -> None:
        self.calls.append(("presenter.info", message))
        self.messages.append(message)


class FakeReader:
    def __init__(self, calls: list, response: RemoteResponse | None = None):
        self.calls = calls
        self.response = response or RemoteResponse(200, "OK", {"files": []})
        self.error: Exception | None = None

    async def get_content(self, script_id: str) -> RemoteResponse:
        self.calls.append(("reader.get_content", script_id))
        if self.error:
            raise self.error
        return self.response


class ScriptedPrompt:
    """FunctionPrompt that feeds each scripted input to the source, then picks."""

    def __init__(self, inputs: list[str], pick_index: int = 0, free_text: str | None = None):
        self.inputs = inputs
        self.pick_index = pick_index
        self.free_text = free_text
        self.seen: list[list[str]] = []

    def choose(self, source) -> str:
        candidates: list[str] = []
        for text in self.inputs:
            candidates = source(text)
            self.seen.append(candidates)
        if self.free_text is not None:
            return self.free_text
        return candidates[self.pick_index]
