from __future__ import annotations

import uuid
from typing import Any

import pendulum
import pytest

from recruitscoring.core import (
    RequestTypeError,
    RuleExtension,
    ScoringResult,
    TechnicalFocusConfig,
    TechnicalFocusExtension,
)
from recruitscoring.schemas import (
    Candidate,
    CulturalFitRequest,
    Position,
    TechnicalFocusRequest,
)


def build_request(**kwargs: Any) -> TechnicalFocusRequest:
    return TechnicalFocusRequest(candidate=Candidate(), position=Position(), **kwargs)


def build_baseline(score: int = 50, approved: bool = False) -> ScoringResult:
    return ScoringResult(
        candidate_id=uuid.uuid4(),
        position_id=uuid.uuid4(),
        approved=approved,
        score=score,
        feedback=("Contact information complete",),
        processed_at=pendulum.datetime(2025, 1, 1, tz="UTC"),
    )


@pytest.fixture
def extension() -> TechnicalFocusExtension:
    return TechnicalFocusExtension()


def test_satisfies_rule_extension_protocol(extension: TechnicalFocusExtension):
    assert isinstance(extension, RuleExtension)


def test_can_handle_only_process_a(extension: TechnicalFocusExtension):
    assert extension.can_handle(build_request()) is True
    assert extension.can_handle(CulturalFitRequest(candidate=Candidate(), position=Position())) is False


def test_technical_assessment_adds_bonus(extension: TechnicalFocusExtension):
    result = extension.apply_rules(
        build_request(requires_technical_assessment=True),
        build_baseline(),
    )

    assert result.score == 60
    assert result.feedback == ("Contact information complete", "Technical assessment scheduled")
    assert result.process_type == "Process A - Technical Focus"


def test_approval_is_not_recomputed_after_bonus(extension: TechnicalFocusExtension):
    result = extension.apply_rules(
        build_request(requires_technical_assessment=True),
        build_baseline(score=55, approved=False),
    )

    assert result.score == 65
    assert result.approved is False


def test_certifications_without_metadata_only_note_requirement(extension: TechnicalFocusExtension):
    result = extension.apply_rules(
        build_request(certification_requirements=["AZ-204", "CKA"]),
        build_baseline(),
    )

    assert result.score == 50
    assert result.feedback[-1] == "Requires 2 certifications"


def test_certifications_key_presence_counts_as_proof(extension: TechnicalFocusExtension):
    result = extension.apply_rules(
        build_request(
            certification_requirements=["AZ-204"],
            metadata={"certifications": "unrelated"},
        ),
        build_baseline(),
    )

    assert result.score == 65
    assert result.feedback[-2:] == (
        "Requires 1 certifications",
        "Candidate has relevant certifications",
    )


def test_certification_metadata_ignored_without_requirements(extension: TechnicalFocusExtension):
    result = extension.apply_rules(
        build_request(metadata={"certifications": "AZ-204"}),
        build_baseline(),
    )

    assert result.score == 50
    assert result.feedback == ("Contact information complete",)


def test_preferred_interview_time_is_echoed(extension: TechnicalFocusExtension):
    result = extension.apply_rules(
        build_request(preferred_interview_time="Morning (9 AM - 12 PM)"),
        build_baseline(),
    )

    assert result.feedback[-1] == "Preferred interview time: Morning (9 AM - 12 PM)"
    assert result.score == 50


def test_baseline_result_is_left_untouched(extension: TechnicalFocusExtension):
    baseline = build_baseline()

    extension.apply_rules(build_request(requires_technical_assessment=True), baseline)

    assert baseline.score == 50
    assert baseline.feedback == ("Contact information complete",)
    assert baseline.process_type == ""


def test_rejects_other_request_shapes(extension: TechnicalFocusExtension):
    request = CulturalFitRequest(candidate=Candidate(), position=Position())

    with pytest.raises(RequestTypeError) as excinfo:
        extension.apply_rules(request, build_baseline())

    assert excinfo.value.expected == "TechnicalFocusRequest"
    assert excinfo.value.actual == "CulturalFitRequest"
    assert isinstance(excinfo.value, TypeError)


def test_config_changes_bonuses():
    extension = TechnicalFocusExtension(
        config=TechnicalFocusConfig(assessment_bonus=1, certification_bonus=2)
    )

    result = extension.apply_rules(
        build_request(
            requires_technical_assessment=True,
            certification_requirements=["CKA"],
            metadata={"certifications": "CKA"},
        ),
        build_baseline(),
    )

    assert result.score == 53
