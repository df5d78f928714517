"""Sample requests used by the ``demo`` command."""

from __future__ import annotations

from .schemas import (
    Candidate,
    CulturalFitRequest,
    Position,
    ScoringRequest,
    TechnicalFocusRequest,
)


def technical_focus_sample() -> TechnicalFocusRequest:
    return TechnicalFocusRequest(
        candidate=Candidate(
            first_name="John",
            last_name="Doe",
            email="john.doe@example.com",
            phone="+1-555-0123",
            years_of_experience=6,
            skills=("C#", ".NET", "Azure", "Docker", "Kubernetes"),
        ),
        position=Position(
            title="Senior Software Engineer",
            department="Engineering",
            required_skills=("C#", ".NET", "Azure"),
            minimum_experience=5,
            location="Remote",
        ),
        recruitment_channel="Referral",
        priority_level=1,
        recruiter_name="Alice Smith",
        requires_technical_assessment=True,
        preferred_interview_time="Morning (9 AM - 12 PM)",
        certification_requirements=["Azure Developer Associate"],
        metadata={"certifications": "Azure Developer Associate, AWS Solutions Architect"},
    )


def cultural_fit_sample() -> CulturalFitRequest:
    return CulturalFitRequest(
        candidate=Candidate(
            first_name="Jane",
            last_name="Smith",
            email="jane.smith@example.com",
            phone="+1-555-0456",
            years_of_experience=8,
            skills=("Team Leadership", "Agile", "Scrum", "Communication"),
        ),
        position=Position(
            title="Engineering Manager",
            department="Engineering",
            required_skills=("Team Leadership", "Agile"),
            minimum_experience=6,
            location="Hybrid",
        ),
        recruitment_channel="LinkedIn",
        priority_level=2,
        recruiter_name="Bob Johnson",
        requires_cultural_fit_interview=True,
        team_size_preference=12,
        soft_skills_emphasis=["Communication", "Empathy", "Conflict Resolution"],
        metadata={"soft_skills": "Excellent communicator with strong leadership qualities"},
    )


def sample_requests() -> list[ScoringRequest]:
    return [technical_focus_sample(), cultural_fit_sample()]
