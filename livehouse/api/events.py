"""Event CRUD: list is public, create/update/delete need an admin token."""
import logging
import sqlite3

from fastapi import APIRouter, Depends, HTTPException

import livehouse.db as db_module
from livehouse.api.deps import get_db, require_admin
from livehouse.api.schemas import EventBody
from livehouse.errors import (
    MSG_CREATE_FAILED,
    MSG_DELETE_FAILED,
    MSG_FETCH_FAILED,
    MSG_REQUIRED_FIELDS,
    MSG_UPDATE_FAILED,
    STATUS_BAD_REQUEST,
    store_error_to_http,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _check_required(body: EventBody) -> None:
    if not body.has_required_fields():
        raise HTTPException(status_code=STATUS_BAD_REQUEST, detail=MSG_REQUIRED_FIELDS)


@router.get("/events")
def list_events(db: sqlite3.Connection = Depends(get_db)):
    """All events, oldest date first."""
    try:
        events = db_module.list_events(db)
    except sqlite3.Error:
        logger.exception("Listing events failed")
        raise store_error_to_http(MSG_FETCH_FAILED)
    return [e.to_dict() for e in events]


@router.post("/events", dependencies=[Depends(require_admin)])
def create_event(body: EventBody, db: sqlite3.Connection = Depends(get_db)):
    _check_required(body)
    try:
        event_id = db_module.create_event(db, body.to_event())
    except sqlite3.Error:
        logger.exception("Creating event failed")
        raise store_error_to_http(MSG_CREATE_FAILED)
    logger.info("Created event %s on %s", event_id, body.date)
    return {"id": event_id, **body.submitted()}


@router.put("/events/{event_id}", dependencies=[Depends(require_admin)])
def update_event(event_id: int, body: EventBody, db: sqlite3.Connection = Depends(get_db)):
    """
    Replace every field of the event. Fields missing from the body are
    cleared. An unknown id is not an error: nothing is changed.
    """
    _check_required(body)
    try:
        changed = db_module.update_event(db, event_id, body.to_event())
    except sqlite3.Error:
        logger.exception("Updating event %s failed", event_id)
        raise store_error_to_http(MSG_UPDATE_FAILED)
    if not changed:
        logger.info("Update of event %s matched no rows", event_id)
    return {"id": event_id, **body.submitted()}


@router.delete("/events/{event_id}", dependencies=[Depends(require_admin)])
def delete_event(event_id: int, db: sqlite3.Connection = Depends(get_db)):
    try:
        db_module.delete_event(db, event_id)
    except sqlite3.Error:
        logger.exception("Deleting event %s failed", event_id)
        raise store_error_to_http(MSG_DELETE_FAILED)
    return {"success": True}
