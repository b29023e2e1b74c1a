# cc_agent/main.py
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cc_agent.core import config
from cc_agent.core.config import AgentSettings
from cc_agent.api.routers.health import router as health_router
from cc_agent.api.routers.chat import router as chat_router
from cc_agent.providers.base import QueryFn
from cc_agent.providers.claude import get_query
from cc_agent.schemas.chat import ErrorResponse

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def cors(request: Request, call_next) -> Response:
    # pre-flight for any path, answered before routing
    if request.method == "OPTIONS":
        response = Response(status_code=204)
    else:
        response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # 405 only arises for methods neither route accepts (PUT, DELETE, ...)
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content=ErrorResponse(error="Not found").model_dump())
    return JSONResponse(status_code=exc.status_code, content=ErrorResponse(error=str(exc.detail)).model_dump())


def create_app(
    *,
    settings: Optional[AgentSettings] = None,
    query: Optional[QueryFn] = None,
) -> FastAPI:
    # only /health and /chat are served, matched exactly: no docs routes, no slash redirects
    app = FastAPI(title="cc-agent-demo", version="1.0.0", docs_url=None, redoc_url=None, openapi_url=None, redirect_slashes=False)

    app.middleware("http")(cors)
    app.add_exception_handler(StarletteHTTPException, http_error)

    """
    app.state holds the read-only agent settings and the agent client.
    Routers read them through Depends() helpers in api/deps.py, so tests can
    hand in a fake client via create_app(query=...).
    """
    app.state.agent_settings = settings or config.load_agent_settings()
    app.state.query = query or get_query()

    # Routers
    app.include_router(health_router)
    app.include_router(chat_router)

    return app


app = create_app()
