"""Shared ASGI middleware."""

from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from app.core.exceptions import AppException


class PayloadTooLarge(AppException):
    def __init__(self):
        super().__init__(detail="Payload too large.", status_code=413)


class MaxBodySizeMiddleware:
    """
    Cap request bodies at ``limit`` bytes.

    A declared Content-Length over the limit is refused before the app runs.
    Bodies without one (chunked) are counted as the app reads them, and the
    read raises ``PayloadTooLarge`` on the first chunk past the limit, so at
    most one chunk beyond the limit is ever held.
    """

    def __init__(self, app: ASGIApp, limit: int):
        self.app = app
        self.limit = limit

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length is not None:
            if not content_length.isdigit():
                await JSONResponse({"error": "Invalid request body"}, status_code=400)(scope, receive, send)
                return
            if int(content_length) > self.limit:
                await JSONResponse({"error": "Payload too large."}, status_code=413)(scope, receive, send)
                return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.limit:
                    raise PayloadTooLarge()
            return message

        await self.app(scope, limited_receive, send)
