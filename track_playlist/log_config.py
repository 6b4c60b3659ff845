"""Configure package logging to a file and stderr."""

import logging
import os
import sys

LOG_DIR_NAME = "TrackPlaylist"
LOG_FILE_NAME = "track_playlist.log"

# Set by setup_logging(); None when the file handler could not be created.
LOG_FILE_PATH: str | None = None


def setup_logging() -> logging.Logger:
    """Configure the package logger: file in temp dir at DEBUG + stderr at INFO."""
    root = logging.getLogger("track_playlist")
    root.setLevel(logging.DEBUG)
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    global LOG_FILE_PATH
    LOG_FILE_PATH = None
    try:
        log_dir = os.path.join(os.environ.get("TEMP", os.path.expanduser("~")), LOG_DIR_NAME)
        os.makedirs(log_dir, exist_ok=True)
        log_path = os.path.join(log_dir, LOG_FILE_NAME)
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)
        LOG_FILE_PATH = log_path
    except OSError:
        pass

    eh = logging.StreamHandler(sys.stderr)
    eh.setLevel(logging.INFO)
    eh.setFormatter(fmt)
    root.addHandler(eh)

    root.info("Logging started; file: %s", LOG_FILE_PATH or "(none)")
    return root
