import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Request

from tone_picker.exceptions import ToneAdjustmentError, UpstreamUnavailable
from tone_picker.schemas import AdjustToneRequest, AdjustToneResponse, ErrorResponse, HealthResponse
from tone_picker.services.adjust import ToneAdjustmentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


def get_tone_service(request: Request) -> ToneAdjustmentService:
    return request.app.state.tone_service


@router.post(
    "/adjust-tone",
    response_model=AdjustToneResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing text or invalid tone coordinates"},
        401: {"model": ErrorResponse, "description": "Model API rejected the configured key"},
        429: {"model": ErrorResponse, "description": "Model API rate limit"},
        500: {"model": ErrorResponse, "description": "Model call failed"},
    },
)
async def adjust_tone(
    body: AdjustToneRequest,
    service: ToneAdjustmentService = Depends(get_tone_service),
) -> AdjustToneResponse:
    """Rewrite text in the tone picked on the 3x3 grid."""
    try:
        result = await service.adjust_tone(body.text, body.x, body.y)
    except ToneAdjustmentError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.exception("Error adjusting tone")
        raise HTTPException(status_code=500, detail=UpstreamUnavailable.default_message) from e
    return AdjustToneResponse.from_result(result)


@router.get("/health", response_model=HealthResponse)
async def health(service: ToneAdjustmentService = Depends(get_tone_service)) -> HealthResponse:
    return HealthResponse(
        timestamp=datetime.now(timezone.utc).isoformat(),
        cache_size=len(service.cache),
    )
