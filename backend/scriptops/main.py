"""scriptops CLI — typer application entry point.

Invariants:
    - Commands registered explicitly (no auto-discovery)
    - Adapters built per invocation in open_toolkit(); the httpx client closed on exit
    - Credentials loaded before any Google API call
    - Error boundary: ScriptOpsError → its message + exit_code; anything else →
      logged with traceback, generic message, exit 1 — never leaks internal details

Design Decisions:
    - One asyncio.run per command: each invocation is single-shot
    - Settings overrides from global options applied with model_copy, cached
      Settings left untouched
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path

import httpx
import typer
from rich.console import Console
from rich.markup import escape

from scriptops.config import Settings, get_settings
from scriptops.core.domain_types import ScriptId
from scriptops.core.errors import ProjectSettingsError, ScriptOpsError
from scriptops.infrastructure.console import RichFunctionPrompt, RichPresenter
from scriptops.infrastructure.credentials import ClasprcCredentialLoader
from scriptops.infrastructure.google_api import (
    ScriptApiClient,
    ServiceUsageClient,
    create_google_client,
)
from scriptops.infrastructure.local_project import ClaspProjectFile, ClaspProjectIdProvider
from scriptops.infrastructure.manifest_store import ManifestServiceSynchronizer
from scriptops.infrastructure.observability import setup_logging
from scriptops.services.api_toggle import ApiToggleOrchestrator, AppsScriptApiEnabler
from scriptops.services.function_picker import (
    FunctionCatalogFetcher,
    FunctionPicker,
    FuzzyFunctionSelector,
)
from scriptops.services.project_identity import ProjectIdentityResolver

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="scriptops", help="Apps Script project tooling.", no_args_is_help=True,
)
apis_app = typer.Typer(help="Enable or disable Google APIs for the linked project.")
functions_app = typer.Typer(help="Discover functions declared in a script project.")
app.add_typer(apis_app, name="apis")
app.add_typer(functions_app, name="functions")

console = Console()
err_console = Console(stderr=True)


# ─── WIRING ─────────────────────────────────────────────────────

@dataclass
class Toolkit:
    """Adapters for one invocation, plus factories for the services."""
    settings: Settings
    console: Console
    credentials: ClasprcCredentialLoader
    project_file: ClaspProjectFile
    http: httpx.AsyncClient

    @property
    def presenter(self) -> RichPresenter:
        return RichPresenter(self.console)

    def resolver(self) -> ProjectIdentityResolver:
        provider = ClaspProjectIdProvider(self.project_file, self.console)
        return ProjectIdentityResolver(provider, self.project_file.path.name)

    def registry(self) -> ServiceUsageClient:
        return ServiceUsageClient(self.http, self.settings.service_usage_url)

    def api_toggle(self) -> ApiToggleOrchestrator:
        return ApiToggleOrchestrator(
            self.resolver(),
            self.registry(),
            ManifestServiceSynchronizer(self.project_file),
            self.presenter,
            self.settings.registry_domain,
        )

    def apps_script_enabler(self) -> AppsScriptApiEnabler:
        return AppsScriptApiEnabler(
            self.credentials, self.resolver(), self.registry(),
            self.settings.registry_domain,
        )

    def function_picker(self) -> FunctionPicker:
        reader = ScriptApiClient(self.http, self.settings.script_api_url)
        return FunctionPicker(
            FunctionCatalogFetcher(reader, self.presenter),
            FuzzyFunctionSelector(RichFunctionPrompt(self.console)),
        )


@asynccontextmanager
async def open_toolkit(settings: Settings) -> AsyncIterator[Toolkit]:
    credentials = ClasprcCredentialLoader(
        settings.clasprc_path,
        settings.oauth_token_url,
        settings.http_timeout_seconds,
    )
    async with create_google_client(credentials, settings.http_timeout_seconds) as http:
        yield Toolkit(
            settings=settings,
            console=console,
            credentials=credentials,
            project_file=ClaspProjectFile(settings.project_file),
            http=http,
        )


def _run(ctx: typer.Context, command: Callable[[Toolkit], Awaitable[None]]) -> None:
    """Run one async command inside the error boundary."""
    settings: Settings = ctx.obj

    async def _main() -> None:
        async with open_toolkit(settings) as toolkit:
            await command(toolkit)

    try:
        asyncio.run(_main())
    except ScriptOpsError as exc:
        logger.error(
            f"ScriptOpsError: {exc.message}", extra={"error_code": exc.code},
        )
        if settings.log_format == "json":
            err_console.print_json(data=exc.to_response())
        else:
            err_console.print(f"[red]{escape(exc.context.user_message or exc.message)}[/red]")
        raise typer.Exit(exc.exit_code)
    except Exception as exc:
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        err_console.print("[red]An unexpected error occurred[/red]")
        raise typer.Exit(1)


# ─── COMMANDS ───────────────────────────────────────────────────

@app.callback()
def main(
    ctx: typer.Context,
    log_level: str | None = typer.Option(None, help="Log level (DEBUG, INFO, WARNING, ...)."),
    log_format: str | None = typer.Option(None, help="Log format: text or json."),
    project_file: Path | None = typer.Option(None, help="Path to .clasp.json."),
) -> None:
    settings = get_settings()
    updates: dict = {}
    if log_level:
        updates["log_level"] = log_level
    if log_format:
        updates["log_format"] = log_format
    if project_file:
        updates["project_file"] = project_file.expanduser()
    if updates:
        settings = settings.model_copy(update=updates)
    setup_logging(settings.log_level, settings.log_format)
    ctx.obj = settings


@apis_app.command("enable")
def apis_enable(
    ctx: typer.Context,
    name: str = typer.Argument("", help="API name, e.g. sheets."),
) -> None:
    """Enable an API for the Cloud project and declare it in the manifest."""
    async def command(toolkit: Toolkit) -> None:
        await toolkit.credentials.load_credentials()
        await toolkit.api_toggle().toggle(name, True)
    _run(ctx, command)


@apis_app.command("disable")
def apis_disable(
    ctx: typer.Context,
    name: str = typer.Argument("", help="API name, e.g. sheets."),
) -> None:
    """Disable an API for the Cloud project and remove it from the manifest."""
    async def command(toolkit: Toolkit) -> None:
        await toolkit.credentials.load_credentials()
        await toolkit.api_toggle().toggle(name, False)
    _run(ctx, command)


@apis_app.command("status")
def apis_status(
    ctx: typer.Context,
    name: str = typer.Argument("", help="API name, e.g. sheets."),
) -> None:
    """Show whether an API is enabled for the Cloud project."""
    async def command(toolkit: Toolkit) -> None:
        await toolkit.credentials.load_credentials()
        enabled = await toolkit.api_toggle().is_enabled(name)
        toolkit.console.print(f"{name}: {'enabled' if enabled else 'disabled'}")
    _run(ctx, command)


@apis_app.command("setup")
def apis_setup(ctx: typer.Context) -> None:
    """Enable the Apps Script API (script.googleapis.com) for the Cloud project."""
    async def command(toolkit: Toolkit) -> None:
        await toolkit.apps_script_enabler().enable()
        toolkit.console.print("Enabled script API.")
    _run(ctx, command)


@functions_app.command("pick")
def functions_pick(
    ctx: typer.Context,
    script_id: str | None = typer.Option(None, help="Script id (defaults to .clasp.json scriptId)."),
) -> None:
    """Choose a function of the script interactively and print its name."""
    async def command(toolkit: Toolkit) -> None:
        target = script_id or toolkit.project_file.read().script_id
        if not target:
            path = toolkit.project_file.path
            raise ProjectSettingsError(f"No scriptId in {path}. Pass --script-id.", str(path))
        await toolkit.credentials.load_credentials()
        name = await toolkit.function_picker().pick(ScriptId(target))
        typer.echo(name)
    _run(ctx, command)


def run() -> None:
    app()
