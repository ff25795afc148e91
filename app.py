"""Development entrypoint delegating to the application package."""

import logging
import sys

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from interview_bot import config  # noqa: E402
from interview_bot.errors import StorageInitError  # noqa: E402
from interview_bot.main import create_app  # noqa: E402

logging.basicConfig(
    level=config.get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
_LOGGER = logging.getLogger("interview_bot")


def main() -> None:
    try:
        app = create_app()
    except StorageInitError as exc:
        _LOGGER.error("Failed to start server: %s", exc)
        sys.exit(1)

    port = config.get_port()
    _LOGGER.info("Interview Bot API Server running on port %s", port)
    _LOGGER.info("Health check: /api/health")
    app.run(host=config.get_host(), port=port, debug=config.debug_enabled())


if __name__ == "__main__":
    main()
