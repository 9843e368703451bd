"""Command line entry point: pipex <file1> <cmd1> <cmd2> <file2>."""

from __future__ import annotations

import sys
from typing import List, Optional

from .commands import is_only_space
from .formatting import printf
from .output import put_endl
from .pipeline import PipelineError, run_pipeline

_USAGE = "Ex: ./pipex <file1> <cmd1> <cmd2> <file2>\n"


def _usage() -> None:
    put_endl("Error: Invalid arguments\n", sys.stderr)
    printf(_USAGE)


def _blank(command: str) -> bool:
    return not command or is_only_space(command)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the pipeline described by argv and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4 or _blank(args[1]) or _blank(args[2]):
        _usage()
        return 0
    infile, cmd1, cmd2, outfile = args
    try:
        run_pipeline(infile, cmd1, cmd2, outfile)
    except PipelineError as error:
        put_endl(str(error), sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())