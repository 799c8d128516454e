"""Main application entry point.

Runs the FastAPI app under uvicorn. Environment variables are loaded from
.env file. SIGINT/SIGTERM trigger uvicorn's graceful shutdown: new
connections are refused and in-flight requests finish before exit.
"""

import logging
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

from pdftext.config import get_settings  # noqa: E402

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Application entry point."""
    import uvicorn

    from pdftext.api.app import app

    logger.info(f"PDF Text Extractor Server running on port {settings.port}")
    logger.info(f"Access the server at: http://localhost:{settings.port}")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
