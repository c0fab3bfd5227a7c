"""Main application entry point.

Runs the NiceGUI chat client. Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Application entry point.

    Settings are read once here and passed to the page; a missing or invalid
    endpoint stops startup before the server runs.
    """
    from nicegui import ui

    from cyber_assistant.config import get_settings
    from cyber_assistant.ui.chat_page import create_chat_page

    settings = get_settings()
    create_chat_page(settings)

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))

    logger.info(f"Assistant endpoint: {settings.endpoint_url}")
    logger.info(f"Session storage scope: {settings.session_storage_scope.value}")
    logger.info(f"Assistant timeout: {settings.request_timeout}s")
    logger.info(f"Chat UI available at http://localhost:{port}/")

    ui.run(
        title=settings.title,
        favicon="🛡️",
        host=host,
        port=port,
        reload=False,
        show=False,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "cyber-assistant-secret"),
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
