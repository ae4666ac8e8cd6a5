from pydantic import BaseModel, Field


class NormalizedTraits(BaseModel):
    openness: float = Field(ge=0.0, le=1.0)
    conscientiousness: float = Field(ge=0.0, le=1.0)
    extraversion: float = Field(ge=0.0, le=1.0)
    agreeableness: float = Field(ge=0.0, le=1.0)
    neuroticism: float = Field(ge=0.0, le=1.0)


class LikertTraits(BaseModel):
    openness: int = Field(ge=1, le=5)
    conscientiousness: int = Field(ge=1, le=5)
    extraversion: int = Field(ge=1, le=5)
    agreeableness: int = Field(ge=1, le=5)
    neuroticism: int = Field(ge=1, le=5)


class PersonalityRecord(BaseModel):
    normalized: NormalizedTraits
    likert: LikertTraits
