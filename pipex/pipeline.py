"""Connect two commands with a pipe between an input file and an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import IO, List, Mapping, Optional, Tuple

from .commands import CommandNotFoundError, resolve_command
from .output import put_endl, put_str
from .strings import split_words

_OUTPUT_MODE = 0o664


class PipelineError(Exception):
    """Raised when the pipe itself cannot be set up."""


def _report_os_error(error: OSError) -> None:
    put_endl(f"Error: {error.strerror or error}", sys.stderr)


def _report_not_found(command: str) -> None:
    put_str("Error: ", sys.stderr)
    put_str(command, sys.stderr)
    put_endl(": command not found", sys.stderr)


def _first_word(arg: str) -> str:
    words = split_words(arg, " ")
    return words[0] if words else arg


def _start(
    arg: str,
    stdin,
    stdout,
    env: Optional[Mapping[str, str]],
) -> Optional[subprocess.Popen]:
    """Start the program named by arg, or report why it cannot run."""
    try:
        path, words = resolve_command(arg, env)
    except CommandNotFoundError as error:
        _report_not_found(error.command)
        return None
    try:
        return subprocess.Popen(
            words,
            executable=path,
            stdin=stdin,
            stdout=stdout,
            env=dict(env) if env is not None else None,
        )
    except OSError:
        _report_not_found(_first_word(arg))
        return None


def _open_input(infile: str) -> Optional[IO[bytes]]:
    try:
        return open(infile, "rb")
    except OSError as error:
        _report_os_error(error)
        return None


def _open_output(outfile: str) -> Optional[IO[bytes]]:
    try:
        fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _OUTPUT_MODE)
    except OSError as error:
        _report_os_error(error)
        return None
    return os.fdopen(fd, "wb")


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> Tuple[int, int]:
    """Run ``cmd1 < infile | cmd2 > outfile`` and wait for both commands.

    Problems with a file or a command are reported on stderr and give that
    stage the exit status 1; the other stage still runs. Returns the exit
    statuses of the two stages. Raises PipelineError when no pipe can be made.
    """
    try:
        read_fd, write_fd = os.pipe()
    except OSError as error:
        raise PipelineError(f"Error: {error.strerror or error}") from error

    processes: List[Optional[subprocess.Popen]] = []
    try:
        source = _open_input(infile)
        if source is None:
            processes.append(None)
        else:
            with source:
                processes.append(_start(cmd1, source, write_fd, env))

        sink = _open_output(outfile)
        if sink is None:
            processes.append(None)
        else:
            with sink:
                processes.append(_start(cmd2, read_fd, sink, env))
    finally:
        os.close(read_fd)
        os.close(write_fd)

    first, second = (1 if proc is None else proc.wait() for proc in processes)
    return first, second