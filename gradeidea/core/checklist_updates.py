"""Checklist item toggles and the rescoring they trigger."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from gradeidea.core.logging import get_logger, log_with_context
from gradeidea.core.schemas_checklist import ChecklistData, ChecklistSectionKey, DynamicScores
from gradeidea.core.score_sync import sync_idea_scores_quietly
from gradeidea.core.scoring import calculate_dynamic_scores_from_client
from gradeidea.db.checklists import (
    checklist_from_row,
    get_or_create_checklist_document,
    update_checklist_section,
)

logger = get_logger(__name__)

# Same call shape as fastapi.BackgroundTasks.add_task
SyncScheduler = Callable[..., Any]


@dataclass
class ChecklistItemUpdate:
    checklist: ChecklistData
    scores: DynamicScores
    item_found: bool


def _run_now(func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
    func(*args, **kwargs)


def set_item_completion(
    checklist_data: ChecklistData,
    section: ChecklistSectionKey,
    item_id: str,
    completed: bool,
) -> tuple[ChecklistData, bool]:
    """
    Return a copy of the checklist with one suggestion's flag replaced.

    Returns:
        (updated checklist, whether item_id was present in the section)
    """
    current = checklist_data.section(section)
    found = False
    suggestions = []
    for item in current.suggestions:
        if item.id == item_id:
            found = True
            item = item.model_copy(update={"completed": completed})
        suggestions.append(item)

    updated = checklist_data.with_section(
        section, current.model_copy(update={"suggestions": suggestions})
    )
    return updated, found


def update_checklist_item(
    idea_id: str,
    user_id: str,
    section: ChecklistSectionKey,
    item_id: str,
    completed: bool,
    schedule_sync: SyncScheduler | None = None,
) -> ChecklistItemUpdate:
    """
    Toggle one suggestion and kick off rescoring.

    Flow:
    1. Load the checklist, creating the starter checklist if absent
    2. Replace the item's completed flag (unknown item ids change nothing)
    3. Persist the section's suggestions
    4. Compute impact-weighted scores from the in-memory result
    5. Hand a best-effort idea score sync to ``schedule_sync``

    Only a failure in steps 1-3 reaches the caller. Steps 1-3 are a plain
    read-modify-write: two concurrent toggles in the same section can lose
    one update.

    Args:
        idea_id: Idea identifier
        user_id: Owning user identifier
        section: Section holding the item
        item_id: Suggestion id
        completed: New completion flag
        schedule_sync: Task scheduler (e.g. BackgroundTasks.add_task); runs
            the sync inline when omitted

    Returns:
        ChecklistItemUpdate with the updated checklist and estimated scores
    """
    row = get_or_create_checklist_document(idea_id, user_id)
    updated, found = set_item_completion(checklist_from_row(row), section, item_id, completed)

    update_checklist_section(row["id"], section, updated.section(section))

    if not found:
        log_with_context(
            logger,
            logging.DEBUG,
            "Checklist item not in section, nothing toggled",
            idea_id=idea_id,
            section=section.value,
            item_id=item_id,
        )
    else:
        log_with_context(
            logger,
            logging.INFO,
            "Updated checklist item",
            idea_id=idea_id,
            section=section.value,
            item_id=item_id,
            completed=completed,
        )

    scores = calculate_dynamic_scores_from_client(updated)

    (schedule_sync or _run_now)(sync_idea_scores_quietly, idea_id, user_id, updated)

    return ChecklistItemUpdate(checklist=updated, scores=scores, item_found=found)
