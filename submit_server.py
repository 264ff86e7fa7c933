# submit_server.py
import logging

from settings import GatewayConfig
from webapp import create_app

logger = logging.getLogger(__name__)


def main():
    config = GatewayConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not config.notion_token:
        logger.warning("NOTION_TOKEN is not set; Notion will reject submissions")
    if not config.notion_database_id:
        logger.warning("NOTION_DATABASE_ID is not set")

    app = create_app(config)
    logger.info("Server is running on port %s", config.port)
    logger.info("Health check available at http://localhost:%s/health", config.port)
    app.run(host=config.host, port=config.port)


if __name__ == "__main__":
    main()
