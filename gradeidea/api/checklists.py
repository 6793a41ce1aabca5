"""API endpoints for idea checklists."""

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException

from gradeidea.chains.generate_plan import generate_action_plan
from gradeidea.core.auth import get_current_user_id
from gradeidea.core.checklist_updates import update_checklist_item
from gradeidea.core.logging import get_logger
from gradeidea.core.schemas_checklist import (
    ChecklistItemUpdateRequest,
    ChecklistItemUpdateResponse,
    ChecklistResponse,
    GeneratePlanRequest,
    GeneratePlanResponse,
)
from gradeidea.db.checklists import attach_plan, get_or_create_checklist

logger = get_logger(__name__)

router = APIRouter()


@router.get("/ideas/{idea_id}/checklist", response_model=ChecklistResponse)
async def get_checklist(
    idea_id: str,
    user_id: str = Depends(get_current_user_id),
) -> ChecklistResponse:
    """
    Get an idea's checklist, creating the starter checklist on first access.

    Args:
        idea_id: Idea identifier

    Returns:
        ChecklistResponse with all three sections
    """
    try:
        checklist = get_or_create_checklist(idea_id, user_id)
        return ChecklistResponse(idea_id=idea_id, checklist=checklist)

    except Exception as e:
        logger.exception(f"Failed to load checklist for idea {idea_id}")
        raise HTTPException(status_code=500, detail=f"Failed to load checklist: {str(e)}") from e


@router.patch(
    "/ideas/{idea_id}/checklist/items/{item_id}",
    response_model=ChecklistItemUpdateResponse,
)
async def toggle_checklist_item(
    idea_id: str,
    item_id: str,
    request: ChecklistItemUpdateRequest,
    background_tasks: BackgroundTasks,
    user_id: str = Depends(get_current_user_id),
) -> ChecklistItemUpdateResponse:
    """
    Mark a checklist item completed or incomplete.

    Returns the impact-weighted score estimate immediately. The idea's stored
    scores are recomputed in a background task after the response is sent;
    a failure there is logged and does not affect this response.

    Args:
        idea_id: Idea identifier
        item_id: Suggestion id
        request: Section and new completion flag

    Returns:
        ChecklistItemUpdateResponse with the updated checklist and scores
    """
    try:
        result = update_checklist_item(
            idea_id=idea_id,
            user_id=user_id,
            section=request.section,
            item_id=item_id,
            completed=request.completed,
            schedule_sync=background_tasks.add_task,
        )

        return ChecklistItemUpdateResponse(
            idea_id=idea_id,
            item_id=item_id,
            item_found=result.item_found,
            checklist=result.checklist,
            scores=result.scores,
        )

    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except Exception as e:
        logger.exception(f"Failed to update checklist item {item_id} for idea {idea_id}")
        raise HTTPException(
            status_code=500, detail=f"Failed to update checklist item: {str(e)}"
        ) from e


@router.post(
    "/ideas/{idea_id}/checklist/items/{item_id}/plan",
    response_model=GeneratePlanResponse,
)
async def generate_item_plan(
    idea_id: str,
    item_id: str,
    request: GeneratePlanRequest,
    user_id: str = Depends(get_current_user_id),
) -> GeneratePlanResponse:
    """
    Generate an action plan for a checklist item and store it on the item.

    Args:
        idea_id: Idea identifier
        item_id: Suggestion id
        request: Item text and idea description for the prompt

    Returns:
        GeneratePlanResponse with the plan text
    """
    try:
        plan = await generate_action_plan(request.idea_description, request.item_text)
        attach_plan(idea_id, user_id, item_id, plan)

        logger.info(f"Generated plan for item {item_id} of idea {idea_id} ({len(plan)} chars)")
        return GeneratePlanResponse(plan=plan)

    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except Exception as e:
        logger.exception(f"Failed to generate plan for item {item_id}")
        raise HTTPException(status_code=500, detail=f"Failed to generate plan: {str(e)}") from e
