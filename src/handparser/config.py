"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# Reading hand history files
FILE_ENCODING = os.getenv("HANDPARSER_ENCODING", "utf-8-sig")
FILE_ENCODING_ERRORS = os.getenv("HANDPARSER_ENCODING_ERRORS", "replace")

# Folder scans pick up files matching this glob
FILE_GLOB = os.getenv("HANDPARSER_FILE_GLOB", "*.txt")

# Logging
LOG_LEVEL = os.getenv("HANDPARSER_LOG_LEVEL", "WARNING").upper()
