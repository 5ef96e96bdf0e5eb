"""
API server runner
Run with: python run.py  (PORT and ENVIRONMENT are read from the environment / .env)
"""

import logging
import sys
from pathlib import Path

import uvicorn

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from app.config import ENVIRONMENT, PORT

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logger.info("━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━")
    logger.info("💅 Studio Adriana Soares - API")
    logger.info("━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━")
    logger.info(f"🚀 Server listening on port {PORT}")
    logger.info(f"📍 Environment: {ENVIRONMENT}")
    logger.info(f"🌐 URL: http://localhost:{PORT}")
    logger.info("━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━")
    try:
        uvicorn.run("app.main:app", host="0.0.0.0", port=PORT, reload=ENVIRONMENT == "development")
    except KeyboardInterrupt:
        logger.info("👋 Server stopped by user")
    except Exception as e:
        logger.error(f"❌ Server crashed: {e}")
        sys.exit(1)
