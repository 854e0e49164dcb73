"""Response helpers shared by the routers."""
from __future__ import annotations

from fastapi import HTTPException, Response

from skistation.services.errors import NotFoundError


def empty_response() -> Response:
    """200 with no body, returned when a direct lookup finds nothing."""
    return Response(status_code=200)


def not_found(exc: NotFoundError) -> HTTPException:
    return HTTPException(404, str(exc))
