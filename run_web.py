#!/usr/bin/env python3
"""
Script to run the Book Store Management web front end.
"""

import sys
from pathlib import Path

import uvicorn

# Add project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from utilities.config import config
from utilities.logger import setup_logging, get_logger
from web.config import config as web_config


def main():
    """Run the web front end."""
    setup_logging(
        log_level=config.log_level,
        log_format=config.log_format,
        log_file=config.get_log_file_path()
    )

    logger = get_logger(__name__)
    logger.info(
        "Web front end is running",
        url=f"http://{web_config.host}:{web_config.port}",
        backend=web_config.backend_host
    )

    uvicorn.run(
        "web.main:app",
        host=web_config.host,
        port=web_config.port,
        reload=web_config.debug,
        log_level=config.log_level.lower()
    )


if __name__ == "__main__":
    main()
