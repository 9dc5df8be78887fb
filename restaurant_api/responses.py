from __future__ import annotations

from fastapi.responses import JSONResponse

# Path ids are decimal integers; the raw segment is echoed in 404 messages.
ID_PATTERN = r"^-?\d+$"


def not_found(entity: str, entity_id: object) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={"message": f"No {entity} found with ID {entity_id}."},
    )


def fetch_failed(description: str) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"error": f"Failed to fetch {description}."},
    )
