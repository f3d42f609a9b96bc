from datetime import datetime, timezone

from pydantic import BaseModel, Field

STATUS_OK = "OK"


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. ``2024-01-01T00:00:00.000Z``."""
    now = datetime.now(tz=timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class StatusResponse(BaseModel):
    service: str = Field()
    status: str = Field(default=STATUS_OK)
    ts: str = Field(default_factory=utc_timestamp)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"service": "demo-app-service", "status": "OK", "ts": "2024-01-01T00:00:00.000Z"}
            ]
        }
    }
