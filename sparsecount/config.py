import os

LOG_FORMATS = ("console", "json")


class Config:
    """Reads library configuration from environment variables."""

    def __init__(self):
        self.log_level = os.getenv("SPARSECOUNT_LOG_LEVEL", "INFO").upper()

        # "console" for humans, "json" for log shippers
        log_format = os.getenv("SPARSECOUNT_LOG_FORMAT", "console").strip().lower()
        self.log_format = log_format if log_format in LOG_FORMATS else "console"


config = Config()
