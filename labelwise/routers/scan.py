"""
Scan router — package photo → fused ingredient text → analysis.

POST /scan takes a multipart image upload. The response always carries the
fusion result; `analysis` is present only when the fused text is food and
non-empty, and `error` explains why it is missing otherwise.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, File, Header, HTTPException, Query, UploadFile, status

from labelwise.config import settings
from labelwise.routers.analysis import session_preferences
from labelwise.schemas.scan import ScanResponse
from labelwise.services.aggregator import EmptyAnalysisError
from labelwise.services.analysis import analyze
from labelwise.services.signal_fusion import fuse_signals
from labelwise.services.validator import ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["scan"])


@router.post("/scan", response_model=ScanResponse)
async def scan_label(
    image: UploadFile = File(...),
    use_visual: bool = Query(default=True),
    x_session_id: Optional[str] = Header(default=None, alias="X-Session-ID"),
) -> ScanResponse:
    if image.content_type and not image.content_type.startswith("image/"):
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Upload must be an image",
        )

    data = await image.read()
    if not data:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Empty upload")
    if len(data) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Image exceeds {settings.max_upload_bytes} bytes",
        )

    fusion = await fuse_signals(data, use_visual=use_visual)
    logger.info("Scan resolved via %s (is_food=%s)", fusion.source, fusion.is_food)

    if not fusion.is_food or not fusion.ingredient_text.strip():
        return ScanResponse(fusion=fusion, error=fusion.reason)

    try:
        result = analyze(fusion.ingredient_text, session_preferences(x_session_id))
    except ValidationError as exc:
        return ScanResponse(fusion=fusion, error=exc.reason)
    except EmptyAnalysisError as exc:
        return ScanResponse(fusion=fusion, error=str(exc))
    return ScanResponse(fusion=fusion, analysis=result)
