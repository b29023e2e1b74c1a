import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from claude_agent_sdk import ClaudeAgentOptions
from cc_agent.schemas.chat import ChatResponse, ErrorResponse
from cc_agent.api.deps import get_agent_options, get_query_fn
from cc_agent.providers.base import QueryFn
from cc_agent.services.chat_service import collect_reply

router = APIRouter(tags=["chat"])
logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.api_route(
    "/chat",
    methods=["GET", "POST"],
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(
    request: Request,
    options: ClaudeAgentOptions = Depends(get_agent_options),
    query: QueryFn = Depends(get_query_fn),
):
    # prompt is always read from the query string; first value wins, empty counts as missing
    values = request.query_params.getlist("prompt")
    prompt = values[0] if values else None
    if not prompt:
        return _error(400, "Missing prompt parameter")

    logger.info("Chat: %s", prompt)
    try:
        reply = await collect_reply(prompt, options=options, query=query)
    except Exception as e:
        # traceback goes to the log only
        logger.exception("chat failed: %s", e)
        return _error(500, "Internal server error")

    return ChatResponse(prompt=prompt, response=reply)
