"""Persona schemas for AI answer synthesis."""

from enum import StrEnum

from pydantic import BaseModel, Field


class ProficiencyLevel(StrEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"


class ScamExposure(StrEnum):
    NEVER = "never"
    ONCE = "once"
    REPEATEDLY = "repeatedly"


class SideIncomeExperience(StrEnum):
    NONE = "none"
    UNDER_ONE_YEAR = "under_one_year"
    OVER_ONE_YEAR = "over_one_year"


class Attitude(StrEnum):
    SKEPTICAL = "skeptical"
    NEUTRAL = "neutral"
    ENTHUSIASTIC = "enthusiastic"


class Occupation(StrEnum):
    OFFICE_WORKER = "office_worker"
    STUDENT = "student"
    FREELANCER = "freelancer"
    SELF_EMPLOYED = "self_employed"
    HOMEMAKER = "homemaker"
    JOB_SEEKER = "job_seeker"


class MaritalStatus(StrEnum):
    SINGLE = "single"
    MARRIED = "married"


class ParentalStatus(StrEnum):
    NO_CHILDREN = "no_children"
    HAS_CHILDREN = "has_children"


# Prompt labels, in the community's language
TRAIT_LABELS: dict[StrEnum, str] = {
    ProficiencyLevel.BEGINNER: "AI 초보",
    ProficiencyLevel.INTERMEDIATE: "AI 중급 사용자",
    ProficiencyLevel.EXPERT: "AI 고수",
    ScamExposure.NEVER: "강의 사기 피해 경험 없음",
    ScamExposure.ONCE: "강의 사기 피해 1회 경험",
    ScamExposure.REPEATEDLY: "강의 사기 피해 여러 번 경험",
    SideIncomeExperience.NONE: "부업 경험 없음",
    SideIncomeExperience.UNDER_ONE_YEAR: "부업 경험 1년 미만",
    SideIncomeExperience.OVER_ONE_YEAR: "부업 경험 1년 이상",
    Attitude.SKEPTICAL: "회의적",
    Attitude.NEUTRAL: "중립적",
    Attitude.ENTHUSIASTIC: "열정적",
    Occupation.OFFICE_WORKER: "직장인",
    Occupation.STUDENT: "학생",
    Occupation.FREELANCER: "프리랜서",
    Occupation.SELF_EMPLOYED: "자영업자",
    Occupation.HOMEMAKER: "전업주부",
    Occupation.JOB_SEEKER: "구직자",
    MaritalStatus.SINGLE: "미혼",
    MaritalStatus.MARRIED: "기혼",
    ParentalStatus.NO_CHILDREN: "자녀 없음",
    ParentalStatus.HAS_CHILDREN: "자녀 있음",
}


class PersonaDescriptor(BaseModel):
    """Fixed-shape trait selection used only to parametrize one synthesis prompt."""

    proficiency: ProficiencyLevel
    scam_exposure: ScamExposure
    side_income_experience: SideIncomeExperience
    attitude: Attitude
    occupation: Occupation
    marital_status: MaritalStatus
    parental_status: ParentalStatus

    def trait_lines(self) -> list[tuple[str, str]]:
        """(label, value) pairs in a fixed order."""
        return [
            ("AI 활용 수준", TRAIT_LABELS[self.proficiency]),
            ("사기 피해 이력", TRAIT_LABELS[self.scam_exposure]),
            ("부업 경험", TRAIT_LABELS[self.side_income_experience]),
            ("태도", TRAIT_LABELS[self.attitude]),
            ("직업", TRAIT_LABELS[self.occupation]),
            ("결혼 여부", TRAIT_LABELS[self.marital_status]),
            ("자녀 여부", TRAIT_LABELS[self.parental_status]),
        ]


class SynthesizeRequest(BaseModel):
    """Admin request: synthesize answers for a category, optionally publishing as a member."""

    persona: PersonaDescriptor
    category: str = Field(..., min_length=1)
    target_email: str | None = None
    publish: bool = False


class SynthesizeResponse(BaseModel):
    category: str
    questions: list[str]
    answers: list[str]
    content: str
    title: str
    post_id: str | None = None
