"""Console — rich-based spinner, line output, and the live-filter function prompt.

Invariants:
    - Presenter output is observational only; nothing here changes remote/local state
    - stop_spinner() is safe to call when no spinner is running
    - RichFunctionPrompt re-queries its source after every answer and returns one of:
      a listed candidate (by number or exact name), the top candidate (empty answer),
      or free text when the text matches no candidate
"""

from collections.abc import Callable

from rich.console import Console
from rich.prompt import Prompt
from rich.status import Status

from scriptops.core.boundary_protocols import FunctionSource
from scriptops.core.fuzzy_filter import fuzzy_match

_HIGHLIGHT_PRE = "[bold magenta]"
_HIGHLIGHT_POST = "[/bold magenta]"


class RichPresenter:
    def __init__(self, console: Console):
        self.console = console
        self._status: Status | None = None

    def start_spinner(self, text: str) -> None:
        self.stop_spinner()
        self._status = self.console.status(text)
        self._status.start()

    def stop_spinner(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def info(self, message: str) -> None:
        self.console.print(message)


class RichFunctionPrompt:
    """FunctionPrompt that narrows candidates with each typed filter."""

    def __init__(
        self,
        console: Console,
        ask: Callable[[str], str] | None = None,
        max_visible: int = 15,
    ):
        self.console = console
        self.ask = ask or (lambda label: Prompt.ask(label, console=console, default=""))
        self.max_visible = max_visible

    def choose(self, source: FunctionSource) -> str:
        query = ""
        while True:
            candidates = source(query)
            self._render(query, candidates)
            answer = (self.ask("Function name") or "").strip()

            if not answer:
                if candidates:
                    return candidates[0]
                continue
            if answer.isdecimal() and 1 <= int(answer) <= len(candidates):
                return candidates[int(answer) - 1]

            narrowed = source(answer)
            if answer in narrowed or not narrowed:
                return answer
            query = answer

    def _render(self, query: str, candidates: list[str]) -> None:
        if not candidates:
            self.console.print("[dim]No matching functions. Type a name to use it as-is.[/dim]")
            return
        for number, name in enumerate(candidates[: self.max_visible], start=1):
            matched = fuzzy_match(query, name, _HIGHLIGHT_PRE, _HIGHLIGHT_POST)
            label = matched[1] if matched else name
            self.console.print(f"  [cyan]{number:>2}[/cyan]  {label}")
        hidden = len(candidates) - self.max_visible
        if hidden > 0:
            self.console.print(f"  [dim]… {hidden} more, type to filter[/dim]")
