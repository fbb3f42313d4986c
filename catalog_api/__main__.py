"""Process bootstrap — `python -m catalog_api` starts the HTTP listener."""

import uvicorn

from catalog_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "catalog_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
