"""Run the HTTP server. Usage: python -m cc_agent (or cc-agent). Needs ANTHROPIC_API_KEY."""
import logging
import sys

import uvicorn

from cc_agent.core import config

logger = logging.getLogger("cc_agent")


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # keep request headers (and the API key) out of DEBUG logs
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)


def main() -> int:
    configure_logging()

    try:
        config.require_api_key()
    except config.MissingCredentialError as e:
        logger.error("%s", e)
        return 1

    # imported late so a missing key never builds the app
    from cc_agent.main import app

    logger.info("Starting server on port %d", config.PORT)
    logger.info("Endpoints:")
    logger.info("  GET /health - Health check")
    logger.info("  GET /chat?prompt=你好 - Chat with AI")

    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
