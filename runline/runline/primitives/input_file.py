"""Stdin payload files.

A text payload (e.g. a become password) is handed to the process as a
file. The file is created exclusively for one invocation and readable
only by the current user; removing it is the caller's job.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional, Union


def write_input_file(
    text: str,
    directory: Optional[Union[str, Path]] = None,
) -> Path:
    """Write text to a new private temp file and return its path.

    Args:
        text: Payload to write (UTF-8).
        directory: Optional directory for the file, default system temp.

    Returns:
        Path of a closed file ready to be opened for reading.
    """
    fd, name = tempfile.mkstemp(
        prefix="runline-",
        suffix=".input",
        dir=str(directory) if directory is not None else None,
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as stream:
            stream.write(text)
    except Exception:
        os.unlink(name)
        raise
    return Path(name)
