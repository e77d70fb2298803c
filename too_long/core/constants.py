"""Constants used throughout too-long."""


# Defaults
DEFAULT_MAX_LINES = 1000
FILE_ENCODING = "utf-8"

# Environment variables
ENV_PATH = "TLDR_PATH"
ENV_MAX_LINES = "TLDR_MAX_LINES"
ENV_INCLUDE_PATTERN = "TLDR_INCLUDE_PATTERN"
ENV_EXCLUDE_PATTERN = "TLDR_EXCLUDE_PATTERN"
ENV_VERBOSE = "TLDR_VERBOSE"

# Pattern kinds, as named in error messages
INCLUDE = "include"
EXCLUDE = "exclude"

# Report messages
SUCCESS_MESSAGE = "All files are within the line limit."
FAILURE_HEADER = "Files exceeding the line limit:"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
