from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from medfiling.api.errors import register_exception_handlers
from medfiling.api.routes import extract, submit, upload


def create_app() -> FastAPI:
    """Build the API serving the upload, extract and submit stages."""
    app = FastAPI(title="medfiling", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    register_exception_handlers(app)

    @app.get("/health", include_in_schema=False)
    def health_check() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(upload.router, prefix="/api", tags=["upload"])
    app.include_router(extract.router, prefix="/api", tags=["extract"])
    app.include_router(submit.router, prefix="/api", tags=["submit"])
    return app
