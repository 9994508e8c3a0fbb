from fastapi import FastAPI

from .message import router as message_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(message_router)
