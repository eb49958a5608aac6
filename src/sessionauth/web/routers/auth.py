from fastapi import APIRouter
from pydantic import BaseModel, Field

from sessionauth.core.modules.session.models import SessionView
from sessionauth.core.modules.token.models import Claims
from sessionauth.web.deps import AppDep, SessionIdHeaderDep, SignedTokenDep
from sessionauth.web.openapi import ErrorResponse

router = APIRouter(tags=["auth"])


class AuthRequest(BaseModel):
    """Authentication request."""

    username: str = Field(..., description="Username for authentication")
    password: str = Field(..., description="Password for authentication")


@router.post(
    "/auth",
    summary="Authenticate user",
    description="Check username and password, issue a signed token and open a session.",
    operation_id="authenticate",
    responses={
        200: {"description": "Successfully authenticated"},
        400: {"model": ErrorResponse, "description": "Malformed request body"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def authenticate(auth_data: AuthRequest, app: AppDep) -> SessionView:
    session = app.authenticate(auth_data.username, auth_data.password)
    return SessionView.from_domain(session)


@router.post(
    "/validate-jwt",
    summary="Validate signed token",
    description="Verify the signed token in the Authorization header and the session named by Session-ID.",
    operation_id="validateToken",
    responses={
        200: {"description": "Token and session are valid"},
        401: {"model": ErrorResponse, "description": "Invalid or expired token, or expired session"},
        404: {"model": ErrorResponse, "description": "Session not found"},
    },
)
async def validate_token(app: AppDep, token: SignedTokenDep, session_id: SessionIdHeaderDep) -> Claims:
    return app.validate_token(token, session_id)
