import os


class Config:
    """Reads library configuration from environment variables."""

    def __init__(self):
        self.log_level = os.getenv("MAPSET_LOG_LEVEL", "WARNING").upper()

        # "1", "true", "yes" switch the console renderer for JSON lines
        raw_json = os.getenv("MAPSET_LOG_JSON", "false")
        self.log_json = raw_json.strip().lower() in ("1", "true", "yes")


config = Config()
