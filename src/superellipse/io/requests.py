"""Reading batch request files and serializing results.

A request file is a JSON list of request objects, each shaped like
``PathRequest.to_dict()``:

    [
        {"mode": "symmetric", "width": 320, "height": 400, "exponent": 4},
        {"mode": "per-corner", "width": 200, "height": 200,
         "corners": {"top_left": 2, "top_right": 6,
                     "bottom_right": 2, "bottom_left": 6}}
    ]
"""

import json
from collections.abc import Sequence
from pathlib import Path

from superellipse.domain import PathRequest, PathResult
from superellipse.exceptions import InvalidRequestError, RequestFileError


def read_requests(path: Path) -> list[PathRequest]:
    """Load path requests from a JSON file.

    Args:
        path: Path to the request file

    Returns:
        Parsed requests in file order

    Raises:
        RequestFileError: If the file is missing, is not valid JSON, or
            contains an invalid request
    """
    if not path.exists():
        raise RequestFileError(str(path), "file not found")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise RequestFileError(str(path), str(e)) from e
    except json.JSONDecodeError as e:
        raise RequestFileError(str(path), f"invalid JSON: {e.msg} (line {e.lineno})") from e

    if not isinstance(data, list):
        raise RequestFileError(str(path), "expected a JSON list of requests")

    requests: list[PathRequest] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise RequestFileError(str(path), f"request {index} is not an object")
        try:
            requests.append(PathRequest.from_dict(item))
        except InvalidRequestError as e:
            raise RequestFileError(str(path), f"request {index}: {e.reason}") from e

    return requests


def dump_results(results: Sequence[PathResult], indent: int | None = 2) -> str:
    """Serialize results as a JSON list."""
    return json.dumps([r.to_dict() for r in results], indent=indent)
