"""
Surcharge de méthode HTTP pour les formulaires HTML.

Un formulaire ne peut émettre que GET ou POST : un POST dont la query string
porte _method=DELETE (ou PATCH, PUT) est traité comme cette méthode.
"""

from starlette.datastructures import QueryParams
from starlette.types import ASGIApp, Receive, Scope, Send

OVERRIDABLE_METHODS = frozenset({"DELETE", "PATCH", "PUT"})


class MethodOverrideMiddleware:
    """Middleware ASGI réécrivant la méthode des POST surchargés."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] == "POST":
            params = QueryParams(scope.get("query_string", b""))
            override = params.get("_method", "").upper()
            if override in OVERRIDABLE_METHODS:
                scope = {**scope, "method": override}
        await self.app(scope, receive, send)
