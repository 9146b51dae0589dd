"""Constants for the list benchmark."""

# Default configuration values
DEFAULT_LIST_SIZE = 10_000
DEFAULT_ITERATIONS = 5_000
DEFAULT_WARMUP_ROUNDS = 3
DEFAULT_WARMUP_REPETITIONS = 100

# Logging configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library log levels
LIBRARY_LOG_LEVELS = {
    "pandas": "WARNING",
}

# Console output
START_BANNER = "Starting benchmark {array} vs {linked}..."
PARAMETERS_BANNER = "Parameters: LIST_SIZE={list_size}, ITERATIONS={iterations}"
