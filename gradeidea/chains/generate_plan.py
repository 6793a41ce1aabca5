"""Generate a step-by-step action plan for one checklist suggestion."""

from langchain_core.messages import HumanMessage, SystemMessage

from gradeidea.core.config import get_settings
from gradeidea.core.llm import get_llm
from gradeidea.core.logging import get_logger

logger = get_logger(__name__)

SYSTEM_PROMPT = (
    "You are a startup advisor helping founders execute on their ideas. "
    "Provide practical, actionable advice."
)

USER_PROMPT = """The user is building this startup idea: {idea_description}

Help them complete this action item: {item_text}

Return a step-by-step plan in paragraph or list format that is practical and actionable. Focus on concrete steps that a founder can take immediately."""


async def generate_action_plan(idea_description: str, item_text: str) -> str:
    """
    Ask the LLM for a plan to complete a checklist item.

    Args:
        idea_description: The founder's idea text
        item_text: The suggestion to plan for

    Returns:
        Plan text, whitespace-stripped

    Raises:
        ValueError: If the model returns no content
    """
    settings = get_settings()
    llm = get_llm(
        model=settings.PLAN_MODEL,
        temperature=settings.PLAN_TEMPERATURE,
        max_tokens=settings.PLAN_MAX_TOKENS,
    )
    messages = [
        SystemMessage(content=SYSTEM_PROMPT),
        HumanMessage(
            content=USER_PROMPT.format(idea_description=idea_description, item_text=item_text)
        ),
    ]

    logger.debug(f"Requesting action plan ({len(item_text)} char item, model={settings.PLAN_MODEL})")
    response = await llm.ainvoke(messages)

    content = response.content if isinstance(response.content, str) else ""
    plan = content.strip()
    if not plan:
        raise ValueError("No content received from LLM")

    return plan
