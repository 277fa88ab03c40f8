"""
Fixed settings of the dump converter.
Input file names, progress cadence and compression level are constants;
logging and the progress bar can be tuned through the environment.
"""
import logging
import os

# ----------------------------------------------------------------------
# Input files, in processing order
# ----------------------------------------------------------------------
INPUT_FILES = (
    ("Badges", "Badges.xml"),
    ("Comments", "Comments.xml"),
    ("Posts", "Posts.xml"),
    ("PostHistory", "PostHistory.xml"),
    ("PostLinks", "PostLinks.xml"),
    ("Tags", "Tags.xml"),
    ("Users", "Users.xml"),
)

# Log a running count every N records of one kind
PROGRESS_EVERY = 100_000

# gzip level for the output stream (9 = best ratio)
COMPRESSION_LEVEL = 9

# Environment knobs
LOG_LEVEL_ENV = "STACKDUMP_RDF_LOG_LEVEL"
PROGRESS_ENV = "STACKDUMP_RDF_PROGRESS"


def get_log_level() -> str:
    """Log level name for the CLI; INFO unless overridden with a known level name."""
    name = os.environ.get(LOG_LEVEL_ENV, "INFO").strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        return "INFO"
    return name


def progress_enabled() -> bool:
    """Whether the tqdm bar over the entity files is shown."""
    return os.environ.get(PROGRESS_ENV, "1").strip().lower() not in ("0", "false", "no", "off")
