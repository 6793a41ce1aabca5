"""Checklist database operations.

One row per (idea_id, user_id) in the checklists table, with one JSONB
column per section so a toggle rewrites only the section it touches.
"""

from datetime import UTC, datetime
from typing import Any

from gradeidea.core.config import get_settings
from gradeidea.core.logging import get_logger
from gradeidea.core.schemas_checklist import (
    SECTION_FIELDS,
    ChecklistData,
    ChecklistSection,
    ChecklistSectionKey,
)
from gradeidea.db.supabase_client import get_supabase

logger = get_logger(__name__)


class ChecklistNotFoundError(LookupError):
    """No checklist row exists for the idea and user."""


class ChecklistItemNotFoundError(LookupError):
    """No suggestion with the given id exists in the checklist."""


# Starter checklist written the first time an idea's checklist is requested
DEFAULT_CHECKLIST_SECTIONS: dict[str, dict[str, Any]] = {
    "marketPotential": {
        "score": 3,
        "suggestions": [
            {"id": "mkt-1", "text": "Estimate your TAM using industry benchmarks", "completed": False},
            {"id": "mkt-2", "text": "Validate interest with a short landing page MVP", "completed": False},
            {"id": "mkt-3", "text": "Conduct 10 customer interviews", "completed": False},
        ],
    },
    "monetizationClarity": {
        "score": 2,
        "suggestions": [
            {"id": "mon-1", "text": "Define 2-3 pricing tiers", "completed": True},
            {"id": "mon-2", "text": "Research competitor pricing models", "completed": False},
            {"id": "mon-3", "text": "Create a revenue projection model", "completed": False},
        ],
    },
    "executionDifficulty": {
        "score": 4,
        "suggestions": [
            {"id": "exec-1", "text": "Outline the core features in a v1 product", "completed": False},
            {"id": "exec-2", "text": "Identify technical requirements and stack", "completed": False},
        ],
    },
}


def default_checklist_data() -> ChecklistData:
    """Fresh copy of the starter checklist."""
    return ChecklistData.model_validate(DEFAULT_CHECKLIST_SECTIONS)


def _table_name() -> str:
    return get_settings().CHECKLISTS_TABLE


def _now() -> str:
    return datetime.now(UTC).isoformat()


def checklist_from_row(row: dict[str, Any]) -> ChecklistData:
    """Assemble ChecklistData from a checklists row."""
    return ChecklistData.model_validate(
        {key.value: row[column] for key, column in SECTION_FIELDS.items()}
    )


def _section_columns(checklist: ChecklistData) -> dict[str, Any]:
    return {
        column: checklist.section(key).model_dump(mode="json")
        for key, column in SECTION_FIELDS.items()
    }


def get_checklist_document(idea_id: str, user_id: str) -> dict[str, Any] | None:
    """
    Get the checklist row for an idea.

    Args:
        idea_id: Idea identifier
        user_id: Owning user identifier

    Returns:
        Checklist row as dict or None if not found
    """
    supabase = get_supabase()

    try:
        response = (
            supabase.table(_table_name())
            .select("*")
            .eq("idea_id", idea_id)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )

        return response.data[0] if response.data else None

    except Exception as e:
        logger.error(f"Failed to get checklist for idea {idea_id}: {e}")
        raise RuntimeError(f"Supabase error reading checklists: {str(e)}") from e


def get_checklist_by_idea(idea_id: str, user_id: str) -> ChecklistData | None:
    """Get an idea's checklist sections, or None when none exists yet."""
    row = get_checklist_document(idea_id, user_id)
    return checklist_from_row(row) if row else None


def create_checklist(
    idea_id: str, user_id: str, checklist: ChecklistData | None = None
) -> dict[str, Any]:
    """
    Create the checklist row for an idea unless one already exists.

    Relies on the (idea_id, user_id) unique key: a concurrent creator's
    insert is ignored and the row that won is read back instead.

    Args:
        idea_id: Idea identifier
        user_id: Owning user identifier
        checklist: Sections to store (defaults to the starter checklist)

    Returns:
        The checklist row for (idea_id, user_id)
    """
    supabase = get_supabase()
    checklist = checklist or default_checklist_data()

    try:
        now = _now()
        insert_response = (
            supabase.table(_table_name())
            .upsert(
                {
                    "idea_id": idea_id,
                    "user_id": user_id,
                    **_section_columns(checklist),
                    "created_at": now,
                    "updated_at": now,
                },
                on_conflict="idea_id,user_id",
                ignore_duplicates=True,
            )
            .execute()
        )
    except Exception as e:
        logger.error(f"Failed to create checklist for idea {idea_id}: {e}")
        raise RuntimeError(f"Supabase error creating checklists: {str(e)}") from e

    if insert_response.data:
        logger.info(f"Created checklist for idea {idea_id}")
        return insert_response.data[0]

    existing = get_checklist_document(idea_id, user_id)
    if existing is None:
        raise RuntimeError(f"Failed to create checklist for idea {idea_id}")

    logger.debug(f"Checklist for idea {idea_id} already existed, using stored row")
    return existing


def get_or_create_checklist_document(idea_id: str, user_id: str) -> dict[str, Any]:
    """Get the checklist row, creating the starter checklist if absent."""
    row = get_checklist_document(idea_id, user_id)
    if row is None:
        row = create_checklist(idea_id, user_id)
    return row


def get_or_create_checklist(idea_id: str, user_id: str) -> ChecklistData:
    """
    Get or create an idea's checklist sections.

    Args:
        idea_id: Idea identifier
        user_id: Owning user identifier

    Returns:
        Stored sections, or the starter checklist just written
    """
    return checklist_from_row(get_or_create_checklist_document(idea_id, user_id))


def update_checklist_section(
    checklist_id: str, key: ChecklistSectionKey, section: ChecklistSection
) -> dict[str, Any]:
    """
    Overwrite one section of a checklist row.

    Args:
        checklist_id: Checklist row id
        key: Section to write
        section: New section contents

    Returns:
        Updated checklist row as dict
    """
    supabase = get_supabase()

    try:
        response = (
            supabase.table(_table_name())
            .update(
                {
                    SECTION_FIELDS[key]: section.model_dump(mode="json"),
                    "updated_at": _now(),
                }
            )
            .eq("id", checklist_id)
            .execute()
        )
    except Exception as e:
        logger.error(f"Failed to update checklist {checklist_id}: {e}")
        raise RuntimeError(f"Supabase error updating checklists: {str(e)}") from e

    if not response.data:
        raise ChecklistNotFoundError(f"Checklist {checklist_id} not found")

    return response.data[0]


def attach_plan(idea_id: str, user_id: str, item_id: str, plan: str) -> ChecklistData:
    """
    Store a generated action plan on a suggestion.

    Searches every section for the item; only sections holding it are written.

    Args:
        idea_id: Idea identifier
        user_id: Owning user identifier
        item_id: Suggestion id
        plan: Plan text

    Returns:
        Checklist with the plan attached

    Raises:
        ChecklistNotFoundError: If the idea has no checklist
        ChecklistItemNotFoundError: If no section holds the item
    """
    row = get_checklist_document(idea_id, user_id)
    if row is None:
        raise ChecklistNotFoundError(f"Checklist not found for idea {idea_id}")

    checklist = checklist_from_row(row)
    updated = False

    for key in ChecklistSectionKey:
        section = checklist.section(key)
        if not any(item.id == item_id for item in section.suggestions):
            continue

        new_section = section.model_copy(
            update={
                "suggestions": [
                    item.model_copy(update={"plan": plan}) if item.id == item_id else item
                    for item in section.suggestions
                ]
            }
        )
        update_checklist_section(row["id"], key, new_section)
        checklist = checklist.with_section(key, new_section)
        updated = True

    if not updated:
        raise ChecklistItemNotFoundError(f"Checklist item {item_id} not found")

    logger.info(f"Attached plan to checklist item {item_id} for idea {idea_id}")
    return checklist
