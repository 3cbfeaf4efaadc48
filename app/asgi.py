"""ASGI entry point: ``uvicorn app.asgi:app``.

Importing this module builds the app from the environment; tests and tools
that only need the factory import ``app.main`` instead.
"""

from app.main import create_app


app = create_app()
