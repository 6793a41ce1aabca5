"""Idea score fields in the ideas table."""

from typing import Any

from gradeidea.core.config import get_settings
from gradeidea.core.logging import get_logger
from gradeidea.core.schemas_checklist import DynamicScores
from gradeidea.db.supabase_client import get_supabase

logger = get_logger(__name__)


class IdeaNotFoundError(LookupError):
    """No idea row exists for the id and user."""


def _table_name() -> str:
    return get_settings().IDEAS_TABLE


def get_idea(idea_id: str, user_id: str) -> dict[str, Any]:
    """
    Get an idea row owned by a user.

    Args:
        idea_id: Idea identifier
        user_id: Owning user identifier

    Returns:
        Idea row as dict

    Raises:
        IdeaNotFoundError: If no such idea exists
    """
    supabase = get_supabase()

    try:
        response = (
            supabase.table(_table_name())
            .select("*")
            .eq("id", idea_id)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
    except Exception as e:
        logger.error(f"Failed to get idea {idea_id}: {e}")
        raise RuntimeError(f"Supabase error reading ideas: {str(e)}") from e

    if not response.data:
        raise IdeaNotFoundError(f"Idea {idea_id} not found")

    return response.data[0]


def update_idea_scores(
    idea: dict[str, Any],
    scores: DynamicScores,
    base_score: int | None = None,
) -> dict[str, Any]:
    """
    Merge recomputed scores into an idea's analysis.

    Runs the update_idea_scores database function, which merges only the
    four score keys into the stored analysis, so keys written since ``idea``
    was read (insights, recommendation, competition) survive. ``base_score``
    is written only while the stored row has none.

    Args:
        idea: Idea row; only its id and user_id are used for the write
        scores: Scores to store
        base_score: Floor to record on first rescoring

    Returns:
        Updated idea row as dict
    """
    supabase = get_supabase()

    params = {
        "p_idea_id": idea["id"],
        "p_user_id": idea["user_id"],
        "p_scores": {
            "market_potential": scores.market_potential,
            "monetization": scores.monetization,
            "execution": scores.execution,
            "overall_score": scores.overall_score,
        },
        "p_base_score": base_score,
    }

    try:
        response = supabase.rpc("update_idea_scores", params).execute()
    except Exception as e:
        logger.error(f"Failed to update scores for idea {idea['id']}: {e}")
        raise RuntimeError(f"Supabase error updating ideas: {str(e)}") from e

    if not response.data:
        raise IdeaNotFoundError(f"Idea {idea['id']} not found")

    logger.info(
        f"Updated scores for idea {idea['id']}: overall={scores.overall_score}",
        extra={"base_score_set": idea.get("base_score") is None and base_score is not None},
    )
    return response.data[0]
