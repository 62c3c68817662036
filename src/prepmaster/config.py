import os

from dotenv import load_dotenv

load_dotenv()

# Default outlet for list/detail scraping (see prepmaster.editorial.sites)
DEFAULT_SITE: str = os.environ.get("PREPMASTER_SITE", "mk")

# Seconds passed to requests.get for each upstream fetch
FETCH_TIMEOUT: float = float(os.environ.get("FETCH_TIMEOUT", "15"))

# Saved analyses: memory | file | sqlite
STORAGE_BACKEND: str = os.environ.get("STORAGE_BACKEND", "file")
SAVED_ANALYSES_PATH: str = os.environ.get(
    "SAVED_ANALYSES_PATH", "data/saved_analyses.json"
)
SAVED_ANALYSES_DB_PATH: str = os.environ.get(
    "SAVED_ANALYSES_DB_PATH", "data/prepmaster.db"
)

# Name of the blob holding the saved analysis list
STORAGE_KEY = "prep-master-saved-analyses"

# HTTP server
SERVER_HOST: str = os.environ.get("SERVER_HOST", "127.0.0.1")
SERVER_PORT: int = int(os.environ.get("SERVER_PORT", "3847"))

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
