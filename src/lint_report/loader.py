"""Reading lint results from JSON."""

import json
from pathlib import Path
from typing import IO, List, Union

from .exceptions import InputError, MalformedResultError
from .logging_config import get_logger
from .models import FileResult, load_results

logger = get_logger(__name__)


def read_results(source: Union[str, Path, IO[str]]) -> List[FileResult]:
    """Parse a JSON list of file results from a path or an open text stream.

    Raises:
        InputError: If the file can't be read
        MalformedResultError: If the content is not UTF-8 or not valid result JSON
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise _not_utf8(e)
        except OSError as e:
            raise InputError(
                f"Cannot read results: {path}", details={"reason": e.strerror or str(e)}
            )
        name = str(path)
    else:
        try:
            text = source.read()
        except UnicodeDecodeError as e:
            raise _not_utf8(e)
        name = getattr(source, "name", "<stream>")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedResultError("results", f"invalid JSON at line {e.lineno}: {e.msg}")

    results = load_results(data)
    logger.debug(f"Loaded {len(results)} file result(s) from {name}")
    return results


def _not_utf8(error: UnicodeDecodeError) -> MalformedResultError:
    return MalformedResultError("results", f"invalid UTF-8 at byte {error.start}")
