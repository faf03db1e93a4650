# logging_setup.py

import logging
from pathlib import Path
from typing import Optional, Union


def setup_logging(log_file: Optional[Union[str, Path]] = None, level: Union[int, str] = logging.INFO) -> None:
    """
    Configure logging for the dashboard.

    The terminal belongs to the UI, so nothing goes to stderr: records are
    written to log_file when one is given and dropped otherwise.

    Call this ONCE, before the app starts.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    if log_file is None:
        root.addHandler(logging.NullHandler())
    else:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
