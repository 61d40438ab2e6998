"""Main application entry point.

Runs the NiceGUI chat interface.
Environment variables are loaded from .env file.
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
    """Application entry point."""
    from nicegui import ui

    from easychat.chat import get_chat_config
    from easychat.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))

    if not get_chat_config().api_key:
        logger.warning("GEMINI_API_KEY is not set; sends will report a configuration error")

    logger.info(f"Chat UI available at http://localhost:{port}/")

    ui.run(
        title="Easychat",
        favicon="🤖",
        host=host,
        port=port,
        reload=False,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "easychat-secret"),
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
