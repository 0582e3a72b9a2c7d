import uvicorn

from medfiling.api.app import create_app
from medfiling.config.settings import Settings
from medfiling.logging.logger import Log


def main() -> None:
    """Entry point: configure logging -> build the API -> serve it."""
    settings = Settings()
    Log.configure(settings.log_level)
    Log.info(f"Starting medfiling API on {settings.host}:{settings.port} ({settings.app_env})")
    uvicorn.run(
        create_app(),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
