from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    """Severity (or icon kind) of a prompt or notice."""

    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class PromptResult:
    """User's answer to a confirmation prompt. Dismissal counts as not confirmed."""

    confirmed: bool
