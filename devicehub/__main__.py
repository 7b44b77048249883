# External package imports
import uvicorn

# Local application imports
from .core.config import get_settings


def run() -> None:
    """Serve the application with uvicorn using HOST/PORT from settings"""
    settings = get_settings()
    uvicorn.run(
        "devicehub.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
