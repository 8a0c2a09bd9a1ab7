from fastapi import APIRouter

from livehouse.api import events, session, upload

router = APIRouter(prefix="/api")
router.include_router(events.router, tags=["events"])
router.include_router(upload.router, tags=["upload"])
router.include_router(session.router, tags=["session"])
