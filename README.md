# pipex

`pipex` does what this shell line does:

```sh
< file1 cmd1 | cmd2 > file2
```

It opens `file1` as the input of `cmd1`, connects the output of `cmd1` to
the input of `cmd2` through a pipe, and writes the output of `cmd2` to
`file2`. `file2` is created if needed (mode `0664`, before the umask) and
truncated.

## Installation

```sh
pip install .
```

## Usage

```sh
pipex <file1> <cmd1> <cmd2> <file2>
```

For example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

- Each command is split on spaces; repeated spaces are ignored.
- If the first word of a command contains a `/`, the whole command
  argument is used as the program path. Otherwise the first word is looked
  up in the directories listed in `PATH`, and the first existing file is
  used.
- If a command cannot be found or cannot be started, standard error gets
  `Error: <command>: command not found`.
- If `file1` cannot be opened or `file2` cannot be created, the reason is
  written to standard error as `Error: <reason>`. The stage using that
  file does not run, but the other stage still does.
- Exactly four arguments are required, and neither command may be empty or
  consist only of spaces. Otherwise `Error: Invalid arguments` goes to
  standard error and a usage line to standard output.

The command exits with status 0, including after an argument error. It
exits with 1 only when the pipe itself cannot be created.

## What it does not do

Commands are not interpreted by a shell. There is no quoting or escaping,
so an argument containing a space cannot be passed. There is no globbing,
no variable expansion, and no support for more than two commands or for
other redirections.

## Library use

```python
from pipex.pipeline import run_pipeline, PipelineError
from pipex.commands import resolve_command, CommandNotFoundError

statuses = run_pipeline("input.txt", "grep error", "wc -l", "count.txt")
# statuses is (exit status of cmd1, exit status of cmd2)
```

- `pipex.pipeline.run_pipeline(infile, cmd1, cmd2, outfile, env=None)`
  runs both stages and waits for them. It returns their exit statuses, and
  a stage that could not run counts as 1. It raises `PipelineError` only
  when no pipe can be made. `env` is a mapping used both for the `PATH`
  lookup and as the environment of the commands. When it is `None`, the
  current environment is used.
- `pipex.commands.resolve_command(arg, env=None)` returns
  `(program_path, argument_list)`. It raises `CommandNotFoundError`, which
  has a `command` attribute, when the command is blank or not found.
- `pipex.commands.find_in_path(command, env=None)` returns the first
  `PATH` entry where `command` exists, or `None`.
- `pipex.commands.is_only_space`, `contains` and `not_found_message` are
  small helpers used by the command.
- `pipex.cli.main(argv=None)` is the command-line entry point. It returns
  the exit status.

The package also contains the small helpers the command is built on:

- `pipex.strings`: C-style string routines on Python strings, such as
  `strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`,
  `strnstr`, `atoi`, `substr`, `strjoin`, `strtrim`, `split_words`,
  `itoa`, `strmapi` and `striteri`. Positions are returned as indices or
  `None`.
- `pipex.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp` and `calloc` on `bytearray` objects.
- `pipex.chars`: ASCII classification and case conversion, such as
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`
  and `to_lower`.
- `pipex.linkedlist`: `Node`, `LinkedList` (`add_front`, `add_back`,
  `last`, `clear`, `for_each`, `map`, `len()`, iteration) and
  `delete_node`.
- `pipex.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, writing
  to a text stream or an integer file descriptor.
- `pipex.formatting`: `format_printf` and `printf`, supporting `%c %s %p
  %d %i %u %x %X %%`.

## Running the tests

```sh
pip install ".[test]"
pytest
```