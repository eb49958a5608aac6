from fastapi import APIRouter

from sessionauth.core.modules.session.models import SessionId, SessionView
from sessionauth.web.deps import AppDep
from sessionauth.web.openapi import ErrorResponse

router = APIRouter(tags=["session"])


@router.get(
    "/session/{session_id}",
    summary="Validate session",
    description="Return the session if it is still live and refresh its last activity.",
    operation_id="getSession",
    responses={
        200: {"description": "Session is live"},
        401: {"model": ErrorResponse, "description": "Session expired"},
        404: {"model": ErrorResponse, "description": "Session not found"},
    },
)
async def get_session(session_id: str, app: AppDep) -> SessionView:
    session = app.get_and_touch_session(SessionId(session_id))
    return SessionView.from_domain(session)


@router.post(
    "/regenerate-api-hash/{session_id}",
    summary="Rotate API credential",
    description="Replace the API credential of a live session.",
    operation_id="rotateApiCredential",
    responses={
        200: {"description": "Credential rotated"},
        401: {"model": ErrorResponse, "description": "Session expired"},
        404: {"model": ErrorResponse, "description": "Session not found"},
    },
)
async def rotate_api_credential(session_id: str, app: AppDep) -> SessionView:
    session = app.rotate_api_credential(SessionId(session_id))
    return SessionView.from_domain(session)
