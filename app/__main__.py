"""Entry point for running the application as a module."""

import uvicorn

from app.config import get_settings


def main() -> None:
    """Run the application server."""
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
