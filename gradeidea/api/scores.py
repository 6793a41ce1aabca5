"""API endpoints for idea scores and letter grades."""

from fastapi import APIRouter, Depends, HTTPException, Query

from gradeidea.core.auth import get_current_user_id
from gradeidea.core.grading_scale import get_letter_grade
from gradeidea.core.logging import get_logger
from gradeidea.core.schemas_checklist import (
    DynamicScores,
    LetterGradeResponse,
    ScorePreviewRequest,
    UpdateIdeaScoresRequest,
    UpdateIdeaScoresResponse,
)
from gradeidea.core.score_sync import sync_idea_scores
from gradeidea.core.scoring import compute_dynamic_scores

logger = get_logger(__name__)

router = APIRouter()


@router.post("/ideas/{idea_id}/scores", response_model=UpdateIdeaScoresResponse)
async def update_idea_scores(
    idea_id: str,
    request: UpdateIdeaScoresRequest,
    user_id: str = Depends(get_current_user_id),
) -> UpdateIdeaScoresResponse:
    """
    Recompute an idea's scores from a checklist and store them.

    Uses completion-ratio scoring floored at the idea's base score.

    Args:
        idea_id: Idea identifier
        request: Checklist state to score

    Returns:
        UpdateIdeaScoresResponse with the stored scores
    """
    try:
        scores = sync_idea_scores(idea_id, user_id, request.checklist_data)
        return UpdateIdeaScoresResponse(scores=scores)

    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except Exception as e:
        logger.exception(f"Failed to update scores for idea {idea_id}")
        raise HTTPException(status_code=500, detail=f"Failed to update idea scores: {str(e)}") from e


@router.post("/scores/preview", response_model=DynamicScores)
async def preview_scores(request: ScorePreviewRequest) -> DynamicScores:
    """Score a checklist with the requested strategy without storing anything."""
    return compute_dynamic_scores(request.checklist_data, request.strategy, request.base_score)


@router.get("/grading/letter", response_model=LetterGradeResponse)
async def letter_grade(
    score: float = Query(..., description="Overall score, nominally 0-100"),
) -> LetterGradeResponse:
    """Letter grade and color band for a score."""
    grade = get_letter_grade(score)
    return LetterGradeResponse(score=score, letter=grade.letter, color=grade.color.value)
