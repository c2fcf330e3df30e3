# pipex

`pipex` runs two commands connected by a pipe. The first reads from an input
file and the second writes to an output file, as the shell line

```
< infile cmd1 | cmd2 > outfile
```

would, but without starting a shell.

## Installation

```
pip install .
```

## Usage

```
pipex infile "cmd1 args" "cmd2 args" outfile
```

The same entry point can also be started with `python -m pipex.cli`.

Exactly four arguments are required; with any other number a usage line is
printed on standard error and the exit status is 1.

- Each command is split on spaces, runs of spaces counting as one. There is no
  quoting, escaping, globbing or variable expansion.
- The first word is the program. It is used as given when that path is
  executable; otherwise each directory of `PATH` is tried in order. Any
  environment variable whose name begins with `PATH` is taken as the search
  path, the last one found winning. Without such a variable no command is
  found.
- The output file is created if needed (mode `0777`, less the umask) and
  truncated.

Example:

```
pipex input.txt "grep error" "wc -l" count.txt
```

If the input file cannot be opened, the output file cannot be opened, or a
command cannot be found or started, a message such as
`File 1 cannot open: No such file or directory` or
`Command 2 non existing: 'nosuchcmd'` is printed on standard error. The other
command is still started. Once the argument count is right, `pipex` exits with
status 0 whatever the commands do; their own statuses are available from
`run_pipeline` (below).

## Library use

```python
from pipex.cli import run_pipeline
from pipex.command import parse_command, resolve_executable, search_path

status1, status2 = run_pipeline(
    "input.txt", "grep error", "wc -l", "count.txt", {"PATH": "/usr/bin:/bin"}
)

cmd = parse_command("ls -l")          # Command(argv=('ls', '-l'))
path = resolve_executable(cmd.name, search_path({"PATH": "/usr/bin:/bin"}))
```

- `pipex.cli.run_pipeline(infile, cmd1, cmd2, outfile, environ=None)` returns
  the exit statuses of both commands; a command that could not be started
  counts as status 1. `environ` defaults to the current environment.
- `pipex.command.resolve_executable` raises `CommandNotFound` (a
  `LookupError`, with the missing name in its `name` attribute) when nothing
  executable is found.
- `pipex.lines.LineReader(stream, buffer_size=10)` reads a text or binary
  stream through reads of `buffer_size` units. `read_line()` returns the next
  line with its newline, or `None` at the end; the reader is also iterable.
- `pipex.printf.render(template, *args)` formats `%c %s %p %d %i %u %x %X %%`
  and returns the text; `pipex.printf.printf` writes it to standard output
  and returns its length. Unknown conversions are dropped.
- `pipex.libstr` has small string helpers (`atoi`, `itoa`, `split`,
  `strtrim`, `substr`, `strnstr`, `strncmp`, `strrchr`), and `pipex.chars`
  ASCII classification and case conversion (`isalpha`, `isdigit`, `isalnum`,
  `isascii`, `isprint`, `toupper`, `tolower`).

## What it does not do

`pipex` joins exactly two commands. It has no support for longer pipelines,
here-documents, appending to the output file, or shell syntax inside a
command.

## Running the tests

```
pip install .[test]
pytest
```