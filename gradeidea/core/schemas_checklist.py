"""Pydantic schemas for idea checklists and dynamic scores."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ChecklistSectionKey(str, Enum):
    """The three fixed checklist categories, keyed as stored."""

    MARKET_POTENTIAL = "marketPotential"
    MONETIZATION_CLARITY = "monetizationClarity"
    EXECUTION_DIFFICULTY = "executionDifficulty"


class ScoringStrategy(str, Enum):
    """Which score blender to run."""

    COMPLETION_RATIO = "completion_ratio"  # server-authoritative, floored at the base score
    IMPACT_WEIGHTED = "impact_weighted"  # optimistic, per-section baseline plus item impact


class SuggestionPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ChecklistSuggestion(BaseModel):
    """One actionable improvement item."""

    id: str = Field(..., description="Unique within its section")
    text: str
    completed: bool = False
    impact_score: float | None = Field(default=None, description="1-10 weight, impact-weighted scoring only")
    priority: SuggestionPriority | None = None
    plan: str | None = Field(default=None, description="AI-generated action plan")


class ChecklistSection(BaseModel):
    score: int = Field(..., description="AI-assigned baseline quality rating, 1-5")
    suggestions: list[ChecklistSuggestion] = Field(default_factory=list)


class ChecklistData(BaseModel):
    """All three sections of one idea's checklist."""

    model_config = ConfigDict(populate_by_name=True)

    market_potential: ChecklistSection = Field(..., alias="marketPotential")
    monetization_clarity: ChecklistSection = Field(..., alias="monetizationClarity")
    execution_difficulty: ChecklistSection = Field(..., alias="executionDifficulty")

    def section(self, key: ChecklistSectionKey) -> ChecklistSection:
        return getattr(self, SECTION_FIELDS[key])

    def with_section(self, key: ChecklistSectionKey, section: ChecklistSection) -> "ChecklistData":
        """Return a copy with one section replaced."""
        return self.model_copy(update={SECTION_FIELDS[key]: section})


SECTION_FIELDS: dict[ChecklistSectionKey, str] = {
    ChecklistSectionKey.MARKET_POTENTIAL: "market_potential",
    ChecklistSectionKey.MONETIZATION_CLARITY: "monetization_clarity",
    ChecklistSectionKey.EXECUTION_DIFFICULTY: "execution_difficulty",
}


class DynamicScores(BaseModel):
    """Recomputed category and overall scores for an idea."""

    market_potential: int
    monetization: int
    execution: int
    overall_score: int
    letter_grade: str


# =========================
# Request/response payloads
# =========================


class ChecklistResponse(BaseModel):
    idea_id: str
    checklist: ChecklistData


class ChecklistItemUpdateRequest(BaseModel):
    section: ChecklistSectionKey
    completed: bool


class ChecklistItemUpdateResponse(BaseModel):
    idea_id: str
    item_id: str
    item_found: bool
    checklist: ChecklistData
    scores: DynamicScores = Field(..., description="Impact-weighted estimate for immediate display")


class UpdateIdeaScoresRequest(BaseModel):
    checklist_data: ChecklistData


class UpdateIdeaScoresResponse(BaseModel):
    success: bool = True
    scores: DynamicScores


class ScorePreviewRequest(BaseModel):
    checklist_data: ChecklistData
    strategy: ScoringStrategy = ScoringStrategy.COMPLETION_RATIO
    base_score: float | None = None


class LetterGradeResponse(BaseModel):
    score: float
    letter: str
    color: str


class GeneratePlanRequest(BaseModel):
    item_text: str = Field(..., min_length=1)
    idea_description: str = Field(..., min_length=1)


class GeneratePlanResponse(BaseModel):
    success: bool = True
    plan: str
