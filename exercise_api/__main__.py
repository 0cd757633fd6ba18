from __future__ import annotations

import logging

import uvicorn

from exercise_api.config import get_settings


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    logging.getLogger(__name__).info("Starting exercise API (%s) on %s:%d", settings.APP_ENV, settings.HOST, settings.PORT)
    uvicorn.run("exercise_api.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
