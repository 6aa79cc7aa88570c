from moderation_gate.config.settings import Settings
from moderation_gate.interaction.auto_prompt import AutoPrompt
from moderation_gate.interaction.base import BaseConfirmationPrompt
from moderation_gate.interaction.console_prompt import ConsolePrompt


class ConfirmationPromptFactory:
    """Creates the configured confirmation prompt."""

    MODES = ("console", "auto_accept", "auto_decline")

    @classmethod
    def create(cls, settings: Settings) -> BaseConfirmationPrompt:
        mode = settings.confirmation_mode.lower()
        if mode == "console":
            return ConsolePrompt()
        if mode == "auto_accept":
            return AutoPrompt(confirmed=True)
        if mode == "auto_decline":
            return AutoPrompt(confirmed=False)
        raise ValueError(
            f"Unknown confirmation mode '{mode}'. Choose from: {list(cls.MODES)}"
        )
