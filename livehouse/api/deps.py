"""Request-scoped dependencies shared by the routers."""
import sqlite3
from typing import Iterator, Optional

from fastapi import Header, Request

import livehouse.db as db_module
from livehouse.auth import AdminSessions, token_from_header
from livehouse.errors import login_required


def get_db(request: Request) -> Iterator[sqlite3.Connection]:
    conn = db_module.connect(request.app.state.db_path, ensure_schema=False)
    try:
        yield conn
    finally:
        conn.close()


def get_sessions(request: Request) -> AdminSessions:
    return request.app.state.sessions


def optional_admin(request: Request, authorization: Optional[str] = Header(None)) -> Optional[str]:
    """The caller's admin token if it is valid, else None."""
    token = token_from_header(authorization)
    if get_sessions(request).is_valid(token):
        return token
    return None


def require_admin(request: Request, authorization: Optional[str] = Header(None)) -> str:
    token = optional_admin(request, authorization)
    if token is None:
        raise login_required()
    return token
