import logging
import sys

import uvicorn

from filecheck.core.config import StartupConfigError, load_settings
from filecheck.core.logging import configure_logging
from filecheck.main import create_app

logger = logging.getLogger("filecheck")


def main() -> int:
    try:
        settings = load_settings()
    except StartupConfigError as exc:
        configure_logging()
        logger.error("%s", exc)
        return 1

    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info("Server is running on http://%s:%s", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
