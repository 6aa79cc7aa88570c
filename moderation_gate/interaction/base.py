from abc import ABC, abstractmethod

from moderation_gate.interaction.models import PromptResult, Severity


class BaseConfirmationPrompt(ABC):
    """Contract for yes/no confirmation prompts shown to the user."""

    @abstractmethod
    async def prompt(self, title: str, message: str, kind: Severity) -> PromptResult:
        """Present a yes/no decision and suspend until the user answers or dismisses."""


class BaseNotifier(ABC):
    """Contract for fire-and-forget user notices."""

    @abstractmethod
    def notify(self, title: str, message: str, severity: Severity) -> None:
        """Show a notice to the user. Nothing is returned."""
