"""Per-file driver: load, reconstruct, report.

Each file is processed to completion on its own. Any ReconstructionError
is captured in that file's FileResult and the run moves on.
"""

import logging
import sys
from dataclasses import dataclass

from secretrecon.errors import ReconstructionError
from secretrecon.shamir import recover
from secretrecon.shares import load_share_file

logger = logging.getLogger(__name__)


@dataclass
class FileResult:
    path: str
    secret: int = None
    error: Exception = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def line(self) -> str:
        return f"Secret for {self.path}: {self.secret}"


def process_file(path, verify: bool = False) -> FileResult:
    """Reconstruct the secret from one share file."""
    try:
        share_set = load_share_file(path)
        secret = recover(share_set.shares, share_set.k, verify=verify)
    except ReconstructionError as e:
        return FileResult(path=path, error=e)
    return FileResult(path=path, secret=secret)


def run(paths, verify: bool = False, out=None) -> list:
    """Process every path in order.

    Secrets go to out (stdout by default), one line per file; failures
    are logged as errors and skipped.
    """
    out = out or sys.stdout
    results = []
    for path in paths:
        logger.debug("processing %s", path)
        result = process_file(path, verify=verify)
        if result.ok:
            print(result.line(), file=out)
        else:
            logger.error("Skipping %s: %s", path, result.error)
        results.append(result)
    return results
