"""Run configuration."""

import os
from dataclasses import dataclass, field

DEFAULT_FILES = ('testcase1.json', 'testcase2.json')
FILES_ENV = 'SECRETRECON_FILES'
DEFAULT_LOG_LEVEL = 'WARNING'


def default_files() -> list:
    """Share files to process when none are given on the command line.

    SECRETRECON_FILES (os.pathsep separated) overrides DEFAULT_FILES.
    """
    env = os.environ.get(FILES_ENV)
    if env:
        return [p for p in env.split(os.pathsep) if p]
    return list(DEFAULT_FILES)


@dataclass
class RunConfig:
    files: list = field(default_factory=default_files)
    verify: bool = False
    strict: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_args(cls, args):
        return cls(
            files=list(args.files) if args.files else default_files(),
            verify=args.verify,
            strict=args.strict,
            log_level=args.log_level,
        )
