from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .core.config import settings
from .core.logging import setup_logging
from .api.error_handlers import register_exception_handlers

setup_logging()


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


app = create_app()
