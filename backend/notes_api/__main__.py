"""Run the API with uvicorn: ``python -m notes_api``."""
import logging

import uvicorn

from notes_api.config import settings
from notes_api.main import create_app


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("Server running on http://localhost:%d", settings.PORT)
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
