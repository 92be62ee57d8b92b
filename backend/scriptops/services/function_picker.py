"""Function Picker — fetch a script's declared functions, then let the user pick one.

Invariants:
    - Exactly one remote read per fetch; no retry
    - Spinner stopped whether the read succeeds or raises
    - Non-200 status → RemoteFetchError carrying the remote status text
    - The selector never mutates the catalog; candidates are original strings
    - Empty catalog → empty candidate list, free-text entry still possible

Design Decisions:
    - Fetcher and selector are separate classes so either can be reused alone;
      FunctionPicker composes them into the single pull pipeline
    - The live filter is core.fuzzy_filter.filter_names bound to the catalog —
      the prompt owns the input loop, not this module
"""

import logging

from pydantic import ValidationError

from scriptops.core.boundary_protocols import (
    FunctionPrompt,
    FunctionSource,
    Presenter,
    ScriptContentReader,
)
from scriptops.core.domain_types import FunctionCatalog, ScriptId
from scriptops.core.errors import ErrorContext, RemoteFetchError
from scriptops.core.function_catalog import build_function_catalog
from scriptops.core.fuzzy_filter import filter_names
from scriptops.schemas.script_content import ScriptContent

logger = logging.getLogger(__name__)

_SUCCESS_STATUS = 200


class FunctionCatalogFetcher:
    """Reads remote script content and flattens it into a FunctionCatalog."""

    def __init__(self, reader: ScriptContentReader, presenter: Presenter):
        self.reader = reader
        self.presenter = presenter

    async def fetch(self, script_id: ScriptId) -> FunctionCatalog:
        self.presenter.start_spinner("Getting functions")
        try:
            response = await self.reader.get_content(script_id)
        finally:
            self.presenter.stop_spinner()

        if response.status != _SUCCESS_STATUS:
            logger.warning(
                f"Script content read failed: {response.status} {response.status_text}",
                extra={"script_id": script_id, "status_code": response.status},
            )
            raise RemoteFetchError(
                response.status_text, response.status,
                context=ErrorContext(script_id=script_id),
            )

        try:
            content = ScriptContent.model_validate(response.data or {})
        except ValidationError as e:
            raise RemoteFetchError(
                f"Unexpected script content payload: {e.error_count()} invalid field(s)",
                response.status,
                context=ErrorContext(script_id=script_id, debug_info={"errors": e.errors()}),
            ) from e

        catalog = build_function_catalog(content.files)
        logger.info(
            f"Found {len(catalog)} function(s)", extra={"script_id": script_id},
        )
        return catalog


def make_function_source(catalog: FunctionCatalog) -> FunctionSource:
    """Live-filter source over a fixed catalog; input defaults to ""."""
    def source(text: str = "") -> list[str]:
        return filter_names(text or "", catalog)
    return source


class FuzzyFunctionSelector:
    """Interactive fuzzy chooser over a FunctionCatalog."""

    def __init__(self, prompt: FunctionPrompt):
        self.prompt = prompt

    def select(self, catalog: FunctionCatalog) -> str:
        return self.prompt.choose(make_function_source(list(catalog)))


class FunctionPicker:
    """fetch → select, once per invocation."""

    def __init__(self, fetcher: FunctionCatalogFetcher, selector: FuzzyFunctionSelector):
        self.fetcher = fetcher
        self.selector = selector

    async def pick(self, script_id: ScriptId) -> str:
        catalog = await self.fetcher.fetch(script_id)
        return self.selector.select(catalog)
