"""Technical-focus rules for process A."""

from __future__ import annotations

from dataclasses import dataclass

from ...schemas import ScoringRequest, TechnicalFocusRequest
from ..errors import RequestTypeError
from ..result import ScoringResult


@dataclass
class TechnicalFocusConfig:
    """Bonuses awarded by the technical-focus process."""

    assessment_bonus: int = 10
    certification_bonus: int = 15
    certification_metadata_key: str = "certifications"


class TechnicalFocusExtension:
    """Reward technical rigor and certifications."""

    process_type = "A"
    label = "Process A - Technical Focus"

    def __init__(self, *, config: TechnicalFocusConfig | None = None) -> None:
        self._config = config or TechnicalFocusConfig()

    def can_handle(self, request: ScoringRequest) -> bool:
        return request.process_type == self.process_type

    def apply_rules(self, request: ScoringRequest, baseline: ScoringResult) -> ScoringResult:
        if not isinstance(request, TechnicalFocusRequest):
            raise RequestTypeError(TechnicalFocusRequest, type(request))

        points = 0
        feedback: list[str] = []

        if request.requires_technical_assessment:
            feedback.append("Technical assessment scheduled")
            points += self._config.assessment_bonus

        if request.certification_requirements:
            feedback.append(f"Requires {len(request.certification_requirements)} certifications")
            # Key presence counts as proof; the listed names are not compared.
            if self._config.certification_metadata_key in request.metadata:
                feedback.append("Candidate has relevant certifications")
                points += self._config.certification_bonus

        if request.preferred_interview_time:
            feedback.append(f"Preferred interview time: {request.preferred_interview_time}")

        return baseline.adjust(points=points, feedback=feedback, process_type=self.label)
