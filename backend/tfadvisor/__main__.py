"""Entry point for running the service with `python -m tfadvisor`."""

import uvicorn

from tfadvisor.config import get_settings


def main():
    """Run the FastAPI application."""
    settings = get_settings()
    uvicorn.run(
        "tfadvisor.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL,
    )


if __name__ == "__main__":
    main()
