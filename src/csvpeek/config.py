"""Default settings for csvpeek."""

# Query defaults
DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0

# Input dialect
DEFAULT_DELIMITER = ","
DEFAULT_ENCODING = "utf-8-sig"  # also reads plain utf-8; drops a leading BOM

# Logging goes to stderr so it never mixes with data on stdout
LOG_LEVEL_ENV_VAR = "CSVPEEK_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
