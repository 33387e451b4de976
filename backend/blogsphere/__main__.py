"""Process bootstrap — `python -m blogsphere` serves the API with uvicorn on HOST:PORT."""

import uvicorn

from blogsphere.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "blogsphere.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
