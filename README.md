# filetamer

A command-line utility that picks files out of a directory tree with glob
rules, then cleans them up (deletes or archives them) and moves or copies them
into a target directory.

## Installation

```
pip install .
```

## Usage

List the files a configuration would select (each one is written to the log):

```
filetamer list SOURCE [--config CONFIG]
```

Clean up and transfer the selected files:

```
filetamer run SOURCE TARGET [--config CONFIG] [--dry-run [true|false]]
```

`run` first applies the cleanup settings to the selected files, then moves or
copies them into `TARGET`, and prints the number of selected files. With
`--dry-run` (or `--dry-run true`) nothing on disk is changed; the planned
actions are only written to the log.

Global options, given before the command:

- `-l/--logging-level LEVEL`: one of `trace`, `debug`, `info`, `warn`,
  `error` (any case) or `1` to `5` (`1` is error, `5` is trace). The default
  is `DEBUG`.
- `-V/--version`: print the version and exit.

Log output goes to `logs/app.log` in the current directory, which is
overwritten on every run. The `logs` directory must already exist.

If the configuration file cannot be read or parsed, the error is logged and
the command exits with status 1.

## Configuration

The configuration file may be YAML (`.yaml`, `.yml`), TOML (`.toml`) or JSON
(`.json`); the format is chosen by the extension. Every section and every key
is optional; values of the wrong type are rejected.

```yaml
filters:
  include_patterns: ["**/*"]     # globs matched against paths relative to SOURCE
  exclude_patterns: ["**/*.tmp"]
cleanup:
  delete: false                  # delete the selected files
  archive: true                  # or pack them into an archive (takes precedence)
  archive_format: zip            # zip, tar or targz
  archive_output: old-files.zip  # default: archive.zip
  keep_original: false           # remove the files after archiving
  compression_level: 6           # passed to the zip or gzip compressor
transfer:
  copy: false                    # copy instead of move
  preserve_structure: true       # keep the directory tree under TARGET
  conflict_suffix: _copy         # added to the name when TARGET has it already
```

Glob notes: `*` and `?` also match `/`; `**` as a whole path component matches
any number of directories; `[...]`, `[!...]` and `{a,b}` are supported.

Zip archives store each file under its bare file name; tar and tar.gz
archives store the path relative to `SOURCE`.

## Limitations

- The `older_than_days`, `min_size` and `max_size` filter keys are accepted
  and validated but not applied when scanning.
- Only the `zip`, `tar` and `targz` archive formats are written.
- Failures while deleting, archiving, moving or copying are logged and do not
  stop the run.

## Library use

```python
from pathlib import Path

from filetamer.config import Config
from filetamer.scanner import scan
from filetamer.mover import move_files

config = Config.from_file(Path("rules.yaml"))
files = scan(Path("downloads"), config.filters)
move_files(files, Path("downloads"), Path("sorted"), config.transfer, dry_run=True)
```

Other entry points: `filetamer.cleaner.clean`, `filetamer.cleaner.archive_files`,
`filetamer.mover.destination_for`, `filetamer.scanner.compile_glob`,
`filetamer.cli.run_command`, `filetamer.cli.list_command` and
`filetamer.logger.init`.