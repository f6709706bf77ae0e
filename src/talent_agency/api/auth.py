"""Admin session endpoints and the shared admin gate."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse

from talent_agency.api.schemas import LoginRequest
from talent_agency.services.auth import SessionGuard  # noqa: TC001

if TYPE_CHECKING:
    from talent_agency.containers import AppContainer

router = APIRouter(prefix="/api", tags=["auth"])

_logger = logging.getLogger(__name__)


def _get_session_guard(request: Request) -> SessionGuard:
    container: AppContainer = request.app.state.container
    return container.session_guard


async def require_admin(
    request: Request,
    guard: SessionGuard = Depends(_get_session_guard),
) -> None:
    """Reject requests whose session is not signed in as admin."""
    if not guard.is_authorized_admin(request.session):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )


@router.post("/login")
@router.post("/admin-login")
async def login(
    payload: LoginRequest,
    request: Request,
    guard: SessionGuard = Depends(_get_session_guard),
) -> dict[str, bool]:
    """Sign the current session in as admin."""
    if not guard.authenticate(request.session, payload.password):
        _logger.warning("Admin login rejected")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect password"
        )
    return {"success": True}


@router.post("/logout")
async def logout(
    request: Request, guard: SessionGuard = Depends(_get_session_guard)
) -> dict[str, bool]:
    """Clear the current session."""
    guard.revoke(request.session)
    return {"success": True}


@router.get("/check-auth")
async def check_auth(
    request: Request, guard: SessionGuard = Depends(_get_session_guard)
) -> JSONResponse:
    """Report whether the current session is signed in as admin."""
    if guard.is_authorized_admin(request.session):
        return JSONResponse({"authenticated": True})
    return JSONResponse(
        {"authenticated": False}, status_code=status.HTTP_401_UNAUTHORIZED
    )
