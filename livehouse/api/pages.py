"""HTML endpoints: the page shell (development mode) and the fragments the browser swaps in."""
import logging
import sqlite3
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

import livehouse.db as db_module
from livehouse.api.deps import get_db, optional_admin
from livehouse.errors import MSG_FETCH_FAILED, store_error_to_http
from livehouse.generator.build import render_index
from livehouse.generator.schedule import EditorState, render_next_show, render_schedule

router = APIRouter()
logger = logging.getLogger(__name__)


def _load_events(db: sqlite3.Connection):
    try:
        return db_module.list_events(db)
    except sqlite3.Error:
        logger.exception("Listing events failed")
        raise store_error_to_http(MSG_FETCH_FAILED)


@router.get("/fragments/schedule", response_class=HTMLResponse, include_in_schema=False)
def schedule_fragment(
    request: Request,
    mode: Optional[str] = None,
    id: Optional[int] = None,
    token: Optional[str] = Depends(optional_admin),
    db: sqlite3.Connection = Depends(get_db),
):
    events = _load_events(db)
    state = EditorState.resolve(mode, id, token is not None, events)
    return render_schedule(request.app.state.jinja_env, events, state)


@router.get("/fragments/next-show", response_class=HTMLResponse, include_in_schema=False)
def next_show_fragment(request: Request, db: sqlite3.Connection = Depends(get_db)):
    return render_next_show(request.app.state.jinja_env, _load_events(db))


def index_page(request: Request):
    """Development mode: render the shell on every request so template edits show up."""
    return HTMLResponse(render_index(request.app.state.jinja_env))
