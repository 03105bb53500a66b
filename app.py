import logging
import os

from post_browser.ui.dash_app import create_dash_app
from post_browser.logging_config import configure_logging

configure_logging()

logger = logging.getLogger(__name__)

app = create_dash_app(os.getenv("POST_BROWSER_CONFIG_ROOT", "config"))
server = app.server


if __name__ == "__main__":
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8050"))
    debug = os.getenv("DEBUG", "0") == "1"

    logger.info("Starting dev server", extra={"host": host, "port": port, "debug": debug})
    app.run(host=host, port=port, debug=debug)
