"""Dynamic viability scoring from checklist progress.

Two blenders turn a checklist into category and overall scores:

- Completion ratio (server path): each category is the percentage of its
  suggestions completed, the overall is their mean, floored at the idea's
  base score so a regrade never lowers what the founder already saw.
- Impact weighted (client path): each section starts from its AI baseline
  rating (1-5, rescaled x20) and gains the impact points of its completed
  suggestions, capped at 100.

The completion ratio variant ignores the per-section baseline rating while
the impact weighted variant never looks at the base score. Both are kept as
separate strategies.
"""

import math
from collections.abc import Sequence
from typing import Protocol

from gradeidea.core.grading_scale import get_letter_grade
from gradeidea.core.schemas_checklist import (
    ChecklistData,
    ChecklistSection,
    DynamicScores,
    ScoringStrategy,
)

__all__ = [
    "BASELINE_SCALE",
    "MAX_SCORE",
    "ScoringStrategy",
    "calculate_category_score",
    "calculate_dynamic_scores",
    "calculate_dynamic_scores_from_client",
    "calculate_overall_score",
    "calculate_section_impact_score",
    "compute_dynamic_scores",
    "round_half_up",
]

# Section baseline ratings are 1-5; multiply to land on the 0-100 scale
BASELINE_SCALE = 20
MAX_SCORE = 100


class _Completable(Protocol):
    completed: bool


def round_half_up(value: float) -> int:
    """Round .5 upward (12.5 -> 13) instead of to the nearest even integer."""
    return math.floor(value + 0.5)


def calculate_category_score(suggestions: Sequence[_Completable]) -> int:
    """
    Percentage of a category's suggestions that are completed.

    Args:
        suggestions: Items exposing a ``completed`` flag

    Returns:
        Integer 0-100; 0 for an empty category
    """
    if not suggestions:
        return 0

    completed = sum(1 for item in suggestions if item.completed)
    return round_half_up(completed / len(suggestions) * 100)


def calculate_overall_score(market_potential: float, monetization: float, execution: float) -> int:
    """Rounded mean of the three category scores."""
    return round_half_up((market_potential + monetization + execution) / 3)


def calculate_dynamic_scores(
    checklist_data: ChecklistData, base_score: float | None = None
) -> DynamicScores:
    """
    Completion-ratio scores, the persisted source of truth.

    Args:
        checklist_data: Checklist with completion flags
        base_score: Optional floor for the overall score, rounded half up

    Returns:
        DynamicScores; overall_score is never below base_score when given
    """
    market_potential = calculate_category_score(checklist_data.market_potential.suggestions)
    monetization = calculate_category_score(checklist_data.monetization_clarity.suggestions)
    execution = calculate_category_score(checklist_data.execution_difficulty.suggestions)

    overall_score = calculate_overall_score(market_potential, monetization, execution)
    if base_score is not None and overall_score < base_score:
        overall_score = round_half_up(base_score)

    return DynamicScores(
        market_potential=market_potential,
        monetization=monetization,
        execution=execution,
        overall_score=overall_score,
        letter_grade=get_letter_grade(overall_score).letter,
    )


def calculate_section_impact_score(section: ChecklistSection) -> int:
    """
    Section baseline rescaled to 0-100 plus the impact of completed items.

    The result stays within [baseline, 100]; a suggestion without an
    impact_score contributes nothing.
    """
    baseline = section.score * BASELINE_SCALE
    additional = sum(item.impact_score or 0 for item in section.suggestions if item.completed)
    return round_half_up(max(baseline, min(baseline + additional, MAX_SCORE)))


def calculate_dynamic_scores_from_client(checklist_data: ChecklistData) -> DynamicScores:
    """
    Impact-weighted scores for immediate feedback after a toggle.

    An approximation: the completion-ratio scores persisted on the idea
    replace it once the server has synced.
    """
    market_potential = calculate_section_impact_score(checklist_data.market_potential)
    monetization = calculate_section_impact_score(checklist_data.monetization_clarity)
    execution = calculate_section_impact_score(checklist_data.execution_difficulty)

    overall_score = calculate_overall_score(market_potential, monetization, execution)

    return DynamicScores(
        market_potential=market_potential,
        monetization=monetization,
        execution=execution,
        overall_score=overall_score,
        letter_grade=get_letter_grade(overall_score).letter,
    )


def compute_dynamic_scores(
    checklist_data: ChecklistData,
    strategy: ScoringStrategy,
    base_score: float | None = None,
) -> DynamicScores:
    """
    Run the named scoring strategy.

    ``base_score`` only applies to the completion-ratio strategy.
    """
    if strategy == ScoringStrategy.IMPACT_WEIGHTED:
        return calculate_dynamic_scores_from_client(checklist_data)
    return calculate_dynamic_scores(checklist_data, base_score)
