"""
Input loading: raw game lines from the bundled resource or any text stream.
"""

import logging
import re
from pathlib import Path
from typing import List, Optional, TextIO, Union

from config import INPUT_ENCODING, INPUT_RESOURCE, WRONG_INPUT_FILE_MESSAGE
from errors import ResourceMissingError

logger = logging.getLogger("cubes.loader")

# Only \n, \r and \r\n end a line; form feeds and other separators stay in the text
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def default_resource_path() -> Path:
    return Path(__file__).resolve().parent / INPUT_RESOURCE


def read_lines(stream: TextIO) -> List[str]:
    """All lines of `stream` in order, without line terminators."""
    text = stream.read()
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def extract_input_lines(path: Optional[Union[str, Path]] = None) -> List[str]:
    """
    Read a number of not yet parsed cube withdrawals.

    With no `path` the bundled input resource is used. A missing file raises
    ResourceMissingError; any other I/O error propagates as is.
    """
    resource = Path(path) if path is not None else default_resource_path()
    try:
        handle = resource.open("r", encoding=INPUT_ENCODING)
    except FileNotFoundError as exc:
        raise ResourceMissingError(WRONG_INPUT_FILE_MESSAGE) from exc

    with handle:
        lines = read_lines(handle)

    logger.debug("Loaded %d lines from %s", len(lines), resource)
    return lines
