from collections.abc import Iterable

from moderation_gate.pdf.base import BasePdfValidator
from moderation_gate.pipeline.models import Detection, PolicyDecision, Verdict

DISALLOWED_CATEGORIES: frozenset[str] = frozenset({"person", "bird", "cat", "dog"})


class PolicyEngine:
    """Decides ALLOW / BLOCK from detections. Pure and deterministic."""

    def __init__(self, disallowed: Iterable[str] = DISALLOWED_CATEGORIES) -> None:
        self._disallowed = frozenset(disallowed)

    @property
    def disallowed(self) -> frozenset[str]:
        return self._disallowed

    def decide(self, detections: Iterable[Detection]) -> PolicyDecision:
        matched = sorted({d.category for d in detections} & self._disallowed)
        if matched:
            return PolicyDecision(
                verdict=Verdict.BLOCK,
                reason=f"disallowed content detected: {', '.join(matched)}",
                matched=tuple(matched),
            )
        return PolicyDecision(verdict=Verdict.ALLOW, reason="no disallowed content detected")

    def decide_document(self, is_valid: bool) -> PolicyDecision:
        if is_valid:
            return PolicyDecision(verdict=Verdict.ALLOW, reason="valid document")
        return PolicyDecision(verdict=Verdict.BLOCK, reason="invalid document")


class DocumentValidator:
    """Checks that a document payload is structurally valid."""

    def __init__(self, pdf_validator: BasePdfValidator) -> None:
        self._pdf_validator = pdf_validator

    def validate_document(self, data: bytes) -> bool:
        return self._pdf_validator.is_valid(data)
