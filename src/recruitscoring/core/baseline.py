"""Baseline scoring shared by every recruitment process."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pendulum
import structlog

from ..schemas import ScoringRequest
from .result import ScoringResult


@dataclass
class BaselineConfig:
    """Thresholds and bonuses for the shared rules."""

    approval_threshold: int = 60
    valid_channels: tuple[str, ...] = ("LinkedIn", "Referral", "Direct", "Agency", "JobBoard")
    referral_channel: str = "Referral"
    referral_bonus: int = 10


@dataclass
class _Tally:
    score: int = 0
    feedback: list[str] = field(default_factory=list)

    def add(self, points: int, message: str) -> None:
        self.score += points
        self.feedback.append(message)


class BaselineScorer:
    """Score the fields every request variant shares.

    Rules run in a fixed order: contact details, experience, skills, priority,
    recruitment channel. Approval is decided on the resulting score before any
    rule extension runs.
    """

    CONTACT_POINTS = 5
    EXPERIENCE_BASE_POINTS = 20
    EXPERIENCE_BONUS_CAP = 20
    EXPERIENCE_PARTIAL_POINTS = 5
    SKILLS_WEIGHT = 0.3

    def __init__(
        self,
        *,
        config: BaselineConfig | None = None,
        now_provider: Any | None = None,
    ) -> None:
        self._config = config or BaselineConfig()
        self._now_provider = now_provider or (lambda: pendulum.now("UTC"))
        self._channels = {channel.lower() for channel in self._config.valid_channels}
        self._logger = structlog.get_logger(__name__)

    def score(self, request: ScoringRequest) -> ScoringResult:
        tally = _Tally()

        self._check_contact(request, tally)
        self._check_experience(request, tally)
        self._match_skills(request, tally)
        self._adjust_priority(request, tally)
        self._validate_channel(request, tally)

        approved = tally.score >= self._config.approval_threshold

        self._logger.debug(
            "baseline.scored",
            candidate_id=str(request.candidate_id),
            score=tally.score,
            approved=approved,
        )

        return ScoringResult(
            candidate_id=request.candidate_id,
            position_id=request.position_id,
            approved=approved,
            score=tally.score,
            feedback=tuple(tally.feedback),
            processed_at=self._now_provider(),
        )

    def _check_contact(self, request: ScoringRequest, tally: _Tally) -> None:
        candidate = request.candidate
        if not candidate.email or not candidate.phone:
            tally.add(-self.CONTACT_POINTS, "Warning: Incomplete contact information")
        else:
            tally.add(self.CONTACT_POINTS, "Contact information complete")

    def _check_experience(self, request: ScoringRequest, tally: _Tally) -> None:
        years = request.candidate.years_of_experience
        minimum = request.position.minimum_experience

        if years >= minimum:
            bonus = min((years - minimum) * 2, self.EXPERIENCE_BONUS_CAP)
            points = self.EXPERIENCE_BASE_POINTS + bonus
            tally.add(points, f"Experience requirement met (+{points} points)")
        else:
            # The message has always said -15 while the partial credit is +5;
            # downstream consumers match on this exact text.
            tally.add(self.EXPERIENCE_PARTIAL_POINTS, "Experience below requirement (-15 points)")

    def _match_skills(self, request: ScoringRequest, tally: _Tally) -> None:
        required = request.position.required_skills
        if not required:
            tally.add(0, "No specific skills required")
            return

        required_keys = {skill.lower() for skill in required}
        matched = {
            skill.lower()
            for skill in request.candidate.skills
            if skill.lower() in required_keys
        }
        match_percentage = len(matched) / len(required) * 100
        points = int(match_percentage * self.SKILLS_WEIGHT)

        tally.add(
            points,
            f"Skills match: {match_percentage:.1f}% ({len(matched)}/{len(required)}) (+{points} points)",
        )

    @staticmethod
    def _adjust_priority(request: ScoringRequest, tally: _Tally) -> None:
        priority = request.priority_level
        if 1 <= priority <= 5:
            bonus = (6 - priority) * 2
            tally.add(bonus, f"Priority level {priority} (+{bonus} points)")

    def _validate_channel(self, request: ScoringRequest, tally: _Tally) -> None:
        channel = request.recruitment_channel
        if channel.lower() not in self._channels:
            tally.add(0, f"Warning: Unrecognized recruitment channel: {channel}")
            return

        tally.add(0, f"Valid recruitment channel: {channel}")
        if channel.lower() == self._config.referral_channel.lower():
            bonus = self._config.referral_bonus
            tally.add(bonus, f"Referral bonus (+{bonus} points)")
