# hookrunner

Building blocks for running Git hooks. The package filters the files a hook
works on and turns a command template into shell command lines. It also finds
hook scripts, orders commands and runs them through `sh -c`. Other helpers
keep installed hook files and the checksum file in step with a configuration.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `hookrunner.result`: the `Result` dataclass, which holds `name`, `status`,
  `text` and `sub`. `Status` has the values `SUCCESS`, `FAILURE` and `SKIP`.
  The helpers `succeeded`, `failed`, `skipped` and `group_result` build
  results. A group fails if any member failed. Otherwise it is skipped if any
  member was skipped, and otherwise it succeeds.
- `hookrunner.cached_reader`: `CachedReader` wraps a binary stream and reads
  it to the end. After that, every further `read` replays the cached data from
  the start, so several commands can read the same standard input.
- `hookrunner.detect_text`: `has_bom` and `detect_text`. Content counts as
  text if it starts with a UTF-8, UTF-16 or UTF-32 byte order mark or holds no
  binary control bytes.
- `hookrunner.filters`: `apply(files, FilterParams(...))` applies
  `by_glob`, `by_exclude`, `by_root` and `by_type`, in that order.
  - `by_glob` matches globs case-insensitively. Its glob syntax comes from
    `compile_glob`, where `*` also matches `/` and `{a,b}` gives alternatives.
  - `by_exclude` takes a regular expression string or a list of globs.
  - `by_root` keeps the files under a root and rewrites that prefix to `./`.
  - `by_type` checks the file types `executable`, `not executable`,
    `symlink`, `not symlink`, `text` and `binary`. `fill_type_mask` builds the
    `TypeMask` from these names and `check_is_text` reads a file's head.
- `hookrunner.executor`: `CommandExecutor.execute(opts, stdin, stdout)` runs
  each command of an `ExecOptions` through `sh -c` in the options' root
  directory. `$VAR` and `${VAR}` references in the extra environment are
  expanded. A `colors` of `"on"` sets `CLICOLOR_FORCE` and `"off"` sets
  `NO_COLOR`. A non-zero exit raises `subprocess.CalledProcessError`.
- `hookrunner.errors`: `SkipError`, which says a job should not run, and
  `ScriptNotExistsError`.
- `hookrunner.commands`: builds command lines from templates.
  - `replace_positional_arguments` fills `{0}`, `{1}` and so on.
  - `replace_quoted` substitutes a file list and honours quotes written around
    the template.
  - `replace_in_chunks` fills `{staged_files}`-style templates. It splits the
    result into several command lines so that each fits a length limit, and
    returns a `Job` holding `execs` and `files`.
  - The module also provides `FilesTemplate`, `escape_files`, `get_n_chars`
    and `intersect`.
- `hookrunner.scripts`: `build_script(ScriptParams(...))` looks for a script
  under `<source_dir>/<hook_name>/` in each source directory. It makes the
  script executable if needed and returns a `Job` with one command line per
  directory where the script was found.
- `hookrunner.ordering`: `sort_by_priority(names, priorities)` returns a new
  sorted list. Names with a non-zero priority come first, in ascending order.
  The rest are ordered by their leading number, and names without a number
  come last in string order.
- `hookrunner.merging`: `first`, `join` and `inherit_exclude` combine the
  root and exclude settings that job groups pass down to their jobs.
- `hookrunner.hooks`: helpers for installed hook files.
  - `clean_hook` removes a hook that carries the `LEFTHOOK` fingerprint. It
    moves any other hook aside to `<hook>.old` and raises
    `OldHookExistsError` unless forced.
  - The module also provides `is_lefthook_file`, `find_main_config`,
    `read_checksum`, `hooks_synchronized` and `is_env_enabled`.
  - `should_refetch` decides from a frequency string such as `always`,
    `never` or `1m` whether to fetch a remote again. It parses the frequency
    with `parse_duration`.
- `hookrunner.run`: checks made before a hook runs.
  - `hook_disabled` is true when `LEFTHOOK` is `0` or `false`.
  - `check_hook_modes` raises `PipedAndParallelError` when both modes are
    set.
  - `parse_files_from_string` splits NUL-separated names.
  - `source_dirs` lists where hook scripts are looked up.

## Example

```python
from hookrunner.filters import FilterParams, apply
from hookrunner.ordering import sort_by_priority
from hookrunner.commands import replace_in_chunks, FilesTemplate

apply(["app/main.rb", "README.md"], FilterParams(glob=["*.rb"]))
# ["app/main.rb"]

sort_by_priority(["10_a", "1_a", "2_a"], {})
# ["1_a", "2_a", "10_a"]

job = replace_in_chunks(
    "echo {staged_files}",
    {"{staged_files}": FilesTemplate(files=["file1", "file2"], count=1)},
    300,
)
# job.execs == ["echo file1 file2"]
```

## What it does not do

The package has no command-line program. It does not read or validate a hook
configuration file and does not talk to Git to list staged or pushed files. It
does not write hook files or the checksum file itself, and it has no runner
that drives a whole hook from start to end. Those pieces are left to the code
that uses these building blocks.