"""Request file I/O for superellipse.

This module reads batch request files and serializes batch results. It
keeps JSON handling out of the engine and the domain models.

Key functions:
- read_requests: Load PathRequests from a JSON file
- dump_results: Serialize PathResults to JSON
"""

from superellipse.io.requests import dump_results, read_requests

__all__ = [
    "dump_results",
    "read_requests",
]
