"""
Common dependencies for FastAPI routes.
"""

import json
from typing import Any, Dict

from fastapi import Request

from app.core.exceptions import BadRequestException

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded",)


async def read_payload(request: Request) -> Dict[str, Any]:
    """
    Raw request body as a dict, from either JSON or a urlencoded form.

    An empty body yields an empty dict so that the validators report the
    missing fields. Malformed JSON, or JSON that is not an object, is a 400.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return {key: form.get(key) for key in form.keys()}

    body = await request.body()
    if not body.strip():
        return {}

    try:
        payload = json.loads(body)
    except ValueError:
        raise BadRequestException("Invalid request body")

    if not isinstance(payload, dict):
        raise BadRequestException("Invalid request body")
    return payload
