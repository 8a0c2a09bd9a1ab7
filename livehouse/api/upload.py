import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile

from livehouse.api.deps import require_admin
from livehouse.errors import MSG_UPLOAD_FAILED, STATUS_BAD_REQUEST, store_error_to_http
from livehouse.uploads import MAX_UPLOAD_BYTES, MSG_NO_FILE, UploadError, store_image

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/upload", dependencies=[Depends(require_admin)])
def upload_image(request: Request, image: Optional[UploadFile] = File(None)):
    """Store a flyer image (multipart field 'image') and return its URL."""
    if image is None:
        raise HTTPException(status_code=STATUS_BAD_REQUEST, detail=MSG_NO_FILE)

    # One byte past the limit is enough to know it is too large
    data = image.file.read(MAX_UPLOAD_BYTES + 1)
    try:
        image_url = store_image(request.app.state.upload_dir, image.filename, image.content_type, data)
    except UploadError as e:
        raise HTTPException(status_code=STATUS_BAD_REQUEST, detail=e.message)
    except OSError:
        logger.exception("Writing upload %s failed", image.filename)
        raise store_error_to_http(MSG_UPLOAD_FAILED)
    return {"imageUrl": image_url}
