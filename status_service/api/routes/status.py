from fastapi import APIRouter, Request

import structlog
from ...schemas.status import STATUS_OK, StatusResponse, utc_timestamp

router = APIRouter()
logger = structlog.get_logger()


@router.api_route(
    "/",
    methods=["GET", "HEAD"],
    response_model=StatusResponse,
    summary="Service status",
    responses={
        200: {
            "description": "Service identity and current time",
            "content": {
                "application/json": {
                    "example": {"service": "demo-app-service", "status": "OK", "ts": "2024-01-01T00:00:00.000Z"}
                }
            },
        }
    },
)
def get_status(request: Request) -> StatusResponse:
    settings = request.app.state.settings
    logger.debug("status_check", env=settings.app_env)
    return StatusResponse(service=settings.service_name, status=STATUS_OK, ts=utc_timestamp())
