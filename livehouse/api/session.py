"""Admin login/logout."""
from fastapi import APIRouter, Depends, HTTPException

from livehouse.api.deps import get_sessions, require_admin
from livehouse.api.schemas import LoginBody
from livehouse.auth import AdminSessions, AuthenticationError
from livehouse.errors import STATUS_UNAUTHORIZED

router = APIRouter()


@router.post("/session")
def login(body: LoginBody, sessions: AdminSessions = Depends(get_sessions)):
    try:
        token = sessions.login(body.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=STATUS_UNAUTHORIZED, detail=e.message)
    return {"token": token}


@router.delete("/session")
def logout(token: str = Depends(require_admin), sessions: AdminSessions = Depends(get_sessions)):
    sessions.logout(token)
    return {"success": True}


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
