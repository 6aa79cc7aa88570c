from moderation_gate.interaction.base import BaseConfirmationPrompt
from moderation_gate.interaction.models import PromptResult, Severity
from moderation_gate.logging.logger import Log


class AutoPrompt(BaseConfirmationPrompt):
    """Answers every prompt with a fixed choice. For headless runs and tests."""

    def __init__(self, confirmed: bool) -> None:
        self._confirmed = confirmed

    async def prompt(self, title: str, message: str, kind: Severity) -> PromptResult:
        Log.debug(f"Auto-answering prompt '{title}' ({kind.value}): confirmed={self._confirmed}")
        return PromptResult(confirmed=self._confirmed)
