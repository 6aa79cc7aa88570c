from moderation_gate.interaction.base import BaseNotifier
from moderation_gate.interaction.models import Severity
from moderation_gate.logging.logger import Log


class LogNotifier(BaseNotifier):
    """Delivers user notices through the application log."""

    def notify(self, title: str, message: str, severity: Severity) -> None:
        text = f"{title}: {message}"
        if severity is Severity.ERROR:
            Log.error(text)
        elif severity is Severity.WARNING:
            Log.warning(text)
        else:
            Log.info(text)
