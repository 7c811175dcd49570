"""AI assistant routes."""
from typing import List, Optional

from fastapi import APIRouter

from idp_service import data
from idp_service.agent import assistant
from idp_service.api.dependencies import AppSettings, LLM, OptionalUser
from idp_service.api.schemas.portal import AiSessionRead, ChatRequest, ChatResponse

router = APIRouter()


@router.post(
    "/chat",
    response_model=ChatResponse,
    summary="Ask the DevOps assistant",
    description="""
    Send the conversation so far and receive the assistant's next turn.

    Signed-in callers get the transcript saved: appended to `session_id` when
    given, otherwise as a new session titled after the first user message.
    Anonymous callers get a reply but nothing is stored.
    """,
    responses={502: {"description": "LLM endpoint failed"}},
)
async def chat(body: ChatRequest, llm: LLM, user: OptionalUser, settings: AppSettings):
    content = await assistant.chat(
        llm,
        [m.model_dump(mode="json") for m in body.messages],
        session_id=body.session_id,
        user_id=user.id if user else None,
        title_max_length=settings.session_title_max_length,
    )
    return ChatResponse(content=content)


@router.get("/sessions", response_model=List[AiSessionRead], summary="Caller's chat sessions")
async def list_sessions(user: OptionalUser):
    if user is None:
        return []
    return await data.user_sessions(user.id)


@router.get(
    "/sessions/{session_id}",
    response_model=Optional[AiSessionRead],
    summary="Get a chat session",
    description="Returns `null` for unknown ids.",
)
async def get_session(session_id: int):
    return await data.get_session(session_id)
