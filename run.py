"""
Serve the request preview API.
Usage: python3 run.py   (from the project root; HOST/PORT/DEBUG come from the environment or .env)
"""
import uvicorn

from config import settings


def main() -> None:
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
