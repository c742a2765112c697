import logging

import uvicorn

from app.core.config import settings
from app.core.logging import configure_logging

logger = logging.getLogger("app")


def main() -> None:
    configure_logging(settings.log_level)
    logger.info("Server listening on http://localhost:%d", settings.port)
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
