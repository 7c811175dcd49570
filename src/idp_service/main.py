"""Console entry point: `idp-service` runs the API under uvicorn."""
import uvicorn

from idp_service.api.app import app
from idp_service.config.settings import get_settings


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
