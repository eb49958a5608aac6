from typing import Annotated, cast

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from sessionauth.app import App
from sessionauth.core.modules.session.models import SessionId

# Security schemes
token_header_scheme = APIKeyHeader(name="Authorization", scheme_name="SignedToken", auto_error=False)
session_header_scheme = APIKeyHeader(name="Session-ID", scheme_name="SessionId", auto_error=False)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_signed_token(header: Annotated[str | None, Depends(token_header_scheme)] = None) -> str | None:
    """Read the signed token from the Authorization header, raw or with a Bearer prefix."""
    if not header:
        return None
    scheme, _, credentials = header.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return header.strip()


async def get_session_id(header: Annotated[str | None, Depends(session_header_scheme)] = None) -> SessionId | None:
    return SessionId(header) if header else None


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
SignedTokenDep = Annotated[str | None, Depends(get_signed_token)]
SessionIdHeaderDep = Annotated[SessionId | None, Depends(get_session_id)]
