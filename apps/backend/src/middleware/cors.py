"""
Process-wide CORS policy for local development.

Lets the mobile app (and any other client on the same Wi-Fi) call every
route without origin restrictions. Not meant for production.
"""

from starlette.types import ASGIApp, Message, Receive, Scope, Send

ALLOWED_ORIGINS = "*"
ALLOWED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")
ALLOWED_HEADERS = ("Content-Type", "Authorization")
MAX_AGE_SECONDS = 3600

CORS_HEADERS = {
    "access-control-allow-origin": ALLOWED_ORIGINS,
    "access-control-allow-methods": ",".join(ALLOWED_METHODS),
    "access-control-allow-headers": ",".join(ALLOWED_HEADERS),
    "access-control-max-age": str(MAX_AGE_SECONDS),
}


class CorsPolicyMiddleware:
    """
    Stamps the fixed CORS headers on every HTTP response and answers
    every OPTIONS request itself, so nothing is ever rejected on
    cross-origin grounds.
    """

    def __init__(self, app: ASGIApp):
        self.app = app
        self.raw_headers = [
            (key.encode("latin-1"), value.encode("latin-1"))
            for key, value in CORS_HEADERS.items()
        ]
        self.header_names = {key for key, _ in self.raw_headers}

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        if scope.get("method", "").upper() == "OPTIONS":
            await self._send_options(send)
            return

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = self._apply(message.get("headers", []))
            await send(message)

        await self.app(scope, receive, send_wrapper)

    def _apply(self, headers) -> list[tuple[bytes, bytes]]:
        filtered = [
            (k, v)
            for (k, v) in headers
            if k.lower() not in self.header_names
        ]
        filtered.extend(self.raw_headers)
        return filtered

    async def _send_options(self, send: Send) -> None:
        headers = self._apply([(b"content-length", b"0")])
        await send({"type": "http.response.start", "status": 200, "headers": headers})
        await send({"type": "http.response.body", "body": b""})
