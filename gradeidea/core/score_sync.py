"""Persist server-authoritative scores onto an idea.

The idea's base score (its first AI overall score) floors every rescoring.
When the idea has no recorded base score yet, its current
analysis.overall_score is used and recorded as the base score.
"""

import logging
from typing import Any

from gradeidea.core.logging import get_logger, log_with_context
from gradeidea.core.schemas_checklist import ChecklistData, DynamicScores
from gradeidea.core.scoring import calculate_dynamic_scores, round_half_up
from gradeidea.db.ideas import get_idea, update_idea_scores

logger = get_logger(__name__)


def resolve_base_score(idea: dict[str, Any]) -> int | None:
    """
    Recorded base score, else the idea's current overall score, else None.

    AI analyses may carry fractional overall scores (72.5); the result is
    rounded half up so it fits the integer base_score column.
    """
    base_score = idea.get("base_score")
    if base_score is None:
        base_score = (idea.get("analysis") or {}).get("overall_score")
    if base_score is None:
        return None
    return round_half_up(base_score)


def sync_idea_scores(idea_id: str, user_id: str, checklist_data: ChecklistData) -> DynamicScores:
    """
    Recompute completion-ratio scores and write them onto the idea.

    Args:
        idea_id: Idea identifier
        user_id: Owning user identifier
        checklist_data: Checklist state to score

    Returns:
        The scores written

    Raises:
        IdeaNotFoundError: If the idea does not exist
        RuntimeError: If storage fails
    """
    idea = get_idea(idea_id, user_id)
    base_score = resolve_base_score(idea)

    scores = calculate_dynamic_scores(checklist_data, base_score)
    update_idea_scores(idea, scores, base_score=base_score)

    log_with_context(
        logger,
        logging.INFO,
        "Synced idea scores",
        idea_id=idea_id,
        overall_score=scores.overall_score,
        letter_grade=scores.letter_grade,
        base_score=base_score,
    )
    return scores


def sync_idea_scores_quietly(
    idea_id: str, user_id: str, checklist_data: ChecklistData
) -> DynamicScores | None:
    """
    Best-effort variant of sync_idea_scores for background use.

    Failures are logged and swallowed; the idea keeps its previous scores
    until the next successful sync. No retry.
    """
    try:
        return sync_idea_scores(idea_id, user_id, checklist_data)
    except Exception as e:
        log_with_context(
            logger,
            logging.WARNING,
            "Score sync failed, idea scores left unchanged",
            idea_id=idea_id,
            error=str(e),
        )
        return None
