from typing import Annotated, cast

from fastapi import Depends, Request

from timeline.app import App
from timeline.core.modules.session.context import SessionContext


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_session_context(request: Request, app: Annotated[App, Depends(get_app)]) -> SessionContext:
    """Session view of this request, created on first use and shared by every later dependency."""
    context = getattr(request.state, "session_context", None)
    if context is None:
        context = app.session_context(request)
        request.state.session_context = context
    return cast(SessionContext, context)


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
SessionDep = Annotated[SessionContext, Depends(get_session_context)]
