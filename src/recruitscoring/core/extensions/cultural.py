"""Cultural and team-fit rules for process B."""

from __future__ import annotations

from dataclasses import dataclass

from ...schemas import CulturalFitRequest, ScoringRequest
from ..errors import RequestTypeError
from ..result import ScoringResult


@dataclass
class CulturalFitConfig:
    """Bonuses awarded by the cultural-fit process."""

    interview_bonus: int = 8
    large_team_threshold: int = 5
    large_team_bonus: int = 5
    soft_skills_bonus: int = 12
    soft_skills_metadata_key: str = "soft_skills"


class CulturalFitExtension:
    """Reward cultural alignment, team collaboration and soft skills."""

    process_type = "B"
    label = "Process B - Cultural & Team Fit"

    def __init__(self, *, config: CulturalFitConfig | None = None) -> None:
        self._config = config or CulturalFitConfig()

    def can_handle(self, request: ScoringRequest) -> bool:
        return request.process_type == self.process_type

    def apply_rules(self, request: ScoringRequest, baseline: ScoringResult) -> ScoringResult:
        if not isinstance(request, CulturalFitRequest):
            raise RequestTypeError(CulturalFitRequest, type(request))

        points = 0
        feedback: list[str] = []

        if request.requires_cultural_fit_interview:
            feedback.append("Cultural fit interview scheduled")
            points += self._config.interview_bonus

        team_size = request.team_size_preference
        if team_size > 0:
            feedback.append(f"Preferred team size: {team_size}")
            if team_size > self._config.large_team_threshold:
                feedback.append("Large team experience preferred")
                points += self._config.large_team_bonus

        if request.soft_skills_emphasis:
            feedback.append(f"Emphasis on {len(request.soft_skills_emphasis)} soft skills")
            if self._config.soft_skills_metadata_key in request.metadata:
                feedback.append("Candidate demonstrates strong soft skills")
                points += self._config.soft_skills_bonus

        return baseline.adjust(points=points, feedback=feedback, process_type=self.label)
