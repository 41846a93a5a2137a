import json
from typing import Any

from fastapi import Request


async def bind_json_body(request: Request) -> dict[str, Any] | None:
    """Decode the request body as a JSON object.

    An empty body binds as `{}` so field rules report what is missing.
    Returns `None` when the body is not a JSON object sent as
    `application/json`. The decoded body is kept on `request.state` for
    error logging.
    """
    raw_body = await request.body()
    if not raw_body.strip():
        payload: Any = {}
    else:
        content_type = request.headers.get("content-type", "")
        if content_type.split(";")[0].strip().lower() != "application/json":
            return None
        try:
            payload = json.loads(raw_body)
        except ValueError:
            return None
    if not isinstance(payload, dict):
        return None
    request.state.json_body = payload
    return payload
