"""Run ``< file1 cmd1 | cmd2 > file2`` without a shell."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import IO, Mapping, Optional, Sequence, Union

from pipex.command import Command, CommandNotFound, parse_command, resolve_executable, search_path

USAGE = "usage: pipex file1 cmd1 cmd2 file2"
FAILURE = 1

_Stream = Union[int, IO[bytes]]


def _report(message: str, detail: object) -> None:
    if isinstance(detail, OSError) and detail.strerror:
        detail = detail.strerror
    print(f"{message}: {detail}", file=sys.stderr)


def _spawn(
    number: int,
    command: Command,
    directories: list[str],
    stdin: _Stream,
    stdout: _Stream,
    env: Mapping[str, str],
) -> Optional[subprocess.Popen]:
    try:
        executable = resolve_executable(command.name, directories)
    except CommandNotFound as exc:
        _report(f"Command {number} non existing", exc.name)
        return None
    try:
        return subprocess.Popen(
            list(command.argv), executable=executable, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as exc:
        _report(f"Command {number} does not work", exc)
        return None


def _start_first(infile, command, directories, pipe_write, env):
    try:
        source = open(infile, "rb")
    except OSError as exc:
        _report("File 1 cannot open", exc)
        return None
    with source:
        return _spawn(1, command, directories, source, pipe_write, env)


def _start_second(outfile, command, directories, pipe_read, env):
    try:
        target = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
    except OSError as exc:
        _report("File 2 cannot open", exc)
        return None
    try:
        return _spawn(2, command, directories, pipe_read, target, env)
    finally:
        os.close(target)


def _wait(process: Optional[subprocess.Popen]) -> int:
    return FAILURE if process is None else process.wait()


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    environ: Optional[Mapping[str, str]] = None,
) -> tuple[int, int]:
    """Feed ``infile`` through ``cmd1`` into ``cmd2``, writing ``outfile``.

    Returns the exit statuses of both commands; a command that could not
    be started counts as having failed with status 1.
    """
    env = dict(os.environ if environ is None else environ)
    directories = search_path(env)
    first_command = parse_command(cmd1)
    second_command = parse_command(cmd2)
    pipe_read, pipe_write = os.pipe()
    try:
        first = _start_first(infile, first_command, directories, pipe_write, env)
        second = _start_second(outfile, second_command, directories, pipe_read, env)
    finally:
        os.close(pipe_read)
        os.close(pipe_write)
    return _wait(first), _wait(second)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point: ``pipex file1 cmd1 cmd2 file2``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        print(USAGE, file=sys.stderr)
        return FAILURE
    run_pipeline(*args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())