"""Request body access for the loosely typed content endpoints."""

from typing import Annotated, Any

import orjson
from fastapi import Depends, Request

from core.exceptions import ValidationError


async def read_json_body(request: Request) -> Any:
    """Decode the JSON body as-is; shape checks are left to the normalizers.

    Declared after ``CurrentAdmin`` in a route, so an unauthenticated request
    is rejected before its body is read.
    """
    raw = await request.body()
    if not raw:
        return {}
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise ValidationError("Request body must be valid JSON") from exc


JsonBody = Annotated[Any, Depends(read_json_body)]
