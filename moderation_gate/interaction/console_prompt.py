import asyncio
from collections.abc import Callable

from moderation_gate.interaction.base import BaseConfirmationPrompt
from moderation_gate.interaction.models import PromptResult, Severity


class ConsolePrompt(BaseConfirmationPrompt):
    """Asks for confirmation on the terminal; only an explicit yes confirms."""

    YES_ANSWERS = frozenset({"y", "yes"})

    def __init__(self, read_line: Callable[[str], str] = input) -> None:
        self._read_line = read_line

    async def prompt(self, title: str, message: str, kind: Severity) -> PromptResult:
        text = f"[{kind.value}] {title}: {message} [y/N] "
        try:
            answer = await asyncio.to_thread(self._read_line, text)
        except EOFError:
            return PromptResult(confirmed=False)
        return PromptResult(confirmed=answer.strip().lower() in self.YES_ANSWERS)
