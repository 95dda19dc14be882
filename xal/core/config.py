"""Configuration settings for the xAL address schema.

This module manages environment variables and library settings.
"""
import logging
import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Library settings.

    Attributes:
        PROJECT_NAME: Name of the project
        XAL_VERSION: Version of the OASIS xAL specification the records mirror
        LOG_LEVEL: Name of the logging level used by setup_logging
        JSON_INDENT: Indentation for JSON output, 0 for compact output
        SCHEMA_OUTPUT_PATH: Default destination of the exported JSON schema
    """
    def __init__(self):
        self.PROJECT_NAME = "xAL Address Schema"
        self.XAL_VERSION = "2.0"

        # Logging Settings
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
        if not isinstance(logging.getLevelName(self.LOG_LEVEL.upper()), int):
            raise ValueError(f"LOG_LEVEL environment variable is not a valid level: {self.LOG_LEVEL}")

        # Serialization Settings
        self.JSON_INDENT = int(os.getenv("XAL_JSON_INDENT", 2))
        self.SCHEMA_OUTPUT_PATH = os.getenv("XAL_SCHEMA_OUTPUT", "xal_schema.yaml")


settings = Settings()
