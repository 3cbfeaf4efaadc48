from __future__ import annotations

from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException
from starlette.responses import Response
from starlette.types import Scope


class SinglePageApp(StaticFiles):
    """Static files with an ``index.html`` fallback for client-side routes.

    Paths under ``api/`` keep their 404 so a typo in an API call is not
    answered with the HTML shell.
    """

    def __init__(self, directory: str) -> None:
        super().__init__(directory=directory, html=True)

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            return await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code != 404 or path == "api" or path.startswith("api/"):
                raise
        return await super().get_response("index.html", scope)
