from __future__ import annotations

import pytest

from recruitscoring.container import create_container
from recruitscoring.core import ScoringDispatcher
from recruitscoring.demo import cultural_fit_sample, technical_focus_sample
from recruitscoring.schemas import (
    Candidate,
    Position,
    ScoringRequest,
    TechnicalFocusRequest,
)


@pytest.fixture
def dispatcher() -> ScoringDispatcher:
    return create_container().dispatcher()


def test_technical_process_approves_strong_referral(dispatcher: ScoringDispatcher):
    request: ScoringRequest = technical_focus_sample()

    result = dispatcher.score(request)

    # 5 contact + 22 experience + 30 skills + 10 priority + 10 referral, then +10 +15
    assert result.score == 102
    assert result.approved is True
    assert result.process_type == "Process A - Technical Focus"
    assert result.candidate_id == request.candidate.id
    assert result.position_id == request.position.id
    assert result.feedback == (
        "Contact information complete",
        "Experience requirement met (+22 points)",
        "Skills match: 100.0% (3/3) (+30 points)",
        "Priority level 1 (+10 points)",
        "Valid recruitment channel: Referral",
        "Referral bonus (+10 points)",
        "Technical assessment scheduled",
        "Requires 1 certifications",
        "Candidate has relevant certifications",
        "Preferred interview time: Morning (9 AM - 12 PM)",
    )


def test_technical_process_rejects_junior_candidate(dispatcher: ScoringDispatcher):
    request: ScoringRequest = TechnicalFocusRequest(
        candidate=Candidate(
            first_name="Junior",
            last_name="Dev",
            email="junior@example.com",
            phone="+1111111111",
            years_of_experience=1,
            skills=("C#",),
        ),
        position=Position(
            title="Senior Developer",
            required_skills=("C#", ".NET", "Azure", "Microservices"),
            minimum_experience=5,
        ),
        recruitment_channel="JobBoard",
        priority_level=3,
        requires_technical_assessment=False,
    )

    result = dispatcher.score(request)

    assert result.score == 23
    assert result.approved is False
    assert "Experience below requirement (-15 points)" in result.feedback
    assert "Technical assessment scheduled" not in result.feedback


def test_cultural_process_adds_all_bonuses(dispatcher: ScoringDispatcher):
    request: ScoringRequest = cultural_fit_sample()

    result = dispatcher.score(request)

    baseline_score = 5 + 24 + 30 + 8
    assert result.score == baseline_score + 8 + 5 + 12
    assert result.approved is True
    assert result.process_type == "Process B - Cultural & Team Fit"
    assert result.feedback[-6:] == (
        "Valid recruitment channel: LinkedIn",
        "Cultural fit interview scheduled",
        "Preferred team size: 12",
        "Large team experience preferred",
        "Emphasis on 3 soft skills",
        "Candidate demonstrates strong soft skills",
    )


def test_extension_bonus_does_not_flip_baseline_rejection(dispatcher: ScoringDispatcher):
    request = TechnicalFocusRequest(
        candidate=Candidate(email="a@example.com", phone="1", years_of_experience=5),
        position=Position(minimum_experience=5),
        recruitment_channel="Referral",
        priority_level=1,
        requires_technical_assessment=True,
        certification_requirements=["CKA"],
        metadata={"certifications": "CKA"},
    )

    result = dispatcher.score(request)

    # baseline 5 + 20 + 10 + 10 = 45, below threshold; extension adds 25
    assert result.score == 70
    assert result.approved is False
