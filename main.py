#!/usr/bin/env python3
"""
Chefs Table - Main Application Entry Point

Serves the recipe, ingredient and chef API over HTTP with uvicorn.
"""

import uvicorn

from api import create_app
from services import DatabaseService, seed_sample_data
from utils import get_config, get_logger, setup_logging


def main():
    """Configure logging, open the database and serve the API"""
    config = get_config()
    setup_logging()
    logger = get_logger("main")

    database = DatabaseService(config.database_path)
    if config.seed_sample_data and seed_sample_data(database):
        logger.info("Sample data loaded")

    app = create_app(config, database)
    logger.info(f"Starting Chefs Table on {config.host}:{config.port}")
    try:
        uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
    finally:
        database.close()


if __name__ == "__main__":
    main()
