from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Scores(_Frozen):
    coverage: int
    specificity: int
    impact: int


class SectionCoverage(_Frozen):
    # Field order drives the order of "Missing section" issues
    education: bool
    experience: bool
    extracurriculars: bool
    leadership: bool
    volunteering: bool
    awards: bool
    skills: bool
    projects: bool
    contact: bool


class Metrics(_Frozen):
    words: int
    bullets: int
    numbers: int
    action_verbs: int = Field(alias="actionVerbs")
    leadership_mentions: int = Field(alias="leadershipMentions")
    awards_mentions: int = Field(alias="awardsMentions")


class Issue(_Frozen):
    title: str
    detail: str
    severity: Severity


class Analysis(_Frozen):
    scores: Scores
    sections: SectionCoverage
    metrics: Metrics
    issues: Tuple[Issue, ...]
    recommendations: Tuple[str, ...]
    summary: str


class AnalyzeRequest(BaseModel):
    resume: str


class AnalyzeResponse(BaseModel):
    analysis: Analysis


class UploadAnalysis(BaseModel):
    filename: str
    text: str
    analysis: Analysis


class ErrorResponse(BaseModel):
    error: str
