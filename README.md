# suitool

`suitool` is a small library for working with the binaries of the Sui tool
family: `sui`, `mvr`, `walrus`, `site-builder` and `move-analyzer`. It
provides:

- parsing of binary specs such as `sui`, `sui@testnet`, `sui@testnet-v1.39.3`
  or `mvr@0.0.5` (`suitool.spec`);
- text tables of installed or default binaries and of the binaries that can
  be installed (`suitool.spec`, `suitool.listing`);
- reading and writing of JSON state files (`suitool.fs_utils`);
- an environment "doctor" that checks a data directory, `PATH`, state files,
  build dependencies (`rustc`, `cargo`, `git`) and GitHub reachability
  (`suitool.doctor`).

It needs Python 3.10 or later and depends only on the standard library.

## Parsing binary specs

```python
from suitool.spec import BinaryName, SpecError, parse_component_with_version

meta = parse_component_with_version("sui@testnet-v1.39.3")
assert meta.name is BinaryName.SUI
assert meta.network == "testnet"
assert meta.version == "v1.39.3"

meta = parse_component_with_version("walrus")
assert meta.network == "testnet" and meta.version is None

try:
    parse_component_with_version("random")
except SpecError as err:
    print(err)   # Invalid binary name: random. ...
```

A spec may separate the binary from its version with `@`, `==`, `=` or a
space (the first of these found in the spec is used). The version part may
be a network (`testnet`, `devnet`, `mainnet`), a network followed by a
version (`testnet-1.39.3`), or a bare version that starts with a digit, or
with `v` and a digit, and contains a dot; a bare version is taken to be on
`testnet`. An empty version, an unknown binary, more than one separator or
any other version text raises `SpecError` (a `ValueError`).

`parse_version_spec` handles the version part alone:

```python
from suitool.spec import parse_version_spec

parse_version_spec(None)             # ("testnet", None)
parse_version_spec("mainnet")        # ("mainnet", None)
parse_version_spec("devnet-1.40.1")  # ("devnet", "1.40.1")
parse_version_spec("v1.60.0")        # ("testnet", "v1.60.0")
```

`BinaryName.from_str` looks a binary up by name, ignoring case, and
`BinaryName.repo_url()` gives the GitHub repository the binary is released
from. `str()` of a `BinaryName` is its name, e.g. `site-builder`.

## Tables

```python
from suitool.spec import BinaryVersion, format_table, print_table
from suitool.listing import format_components, list_components

rows = [
    BinaryVersion("sui", "testnet", "v1.40.1", debug=False),
    BinaryVersion("mvr", "standalone", "v0.0.5", debug=True),
]
print(format_table(rows))   # columns Binary, Release/Branch, Version, Debug
print_table(rows)           # the same table, printed to stdout

print(format_components(["mvr", "sui", "walrus"]))
list_components(["mvr", "sui", "walrus"])
```

`format_table` sorts rows by binary name and shows the debug flag as `Yes`
or `No`. `format_components` renders a one-column table headed
"Available Binaries to Install".

## JSON state files

```python
from pathlib import Path
from suitool.fs_utils import read_json_file, write_json_file

path = Path("default_version.json")
write_json_file(path, {"sui": ["testnet", "v1.40.1", False]})
data = read_json_file(path)
```

`write_json_file` writes indented JSON, replacing any earlier content.
Both functions raise an error whose message names the file: `OSError` when
the file cannot be read, created or written, `ValueError` when its content
is not valid JSON, and `TypeError` when the data cannot be serialized.

## Environment checks

```python
from pathlib import Path
from suitool.doctor import run_doctor_checks

data = Path.home() / ".local" / "share" / "mytools"
report = run_doctor_checks(
    data_dir=data,
    bin_dir=Path.home() / ".local" / "bin",
    installed_path=data / "installed_binaries.json",
    default_path=data / "default_version.json",
)
print(report.errors, report.warnings)
```

Each check prints a line marked `✓` (passed), `!` (warning) or `✗`
(error), and a final line summarises the errors and warnings found. The
returned `CheckReport` keeps every `(message, Outcome)` pair in `entries`
and counts `warnings` and `errors`; `summary()` gives the final line.

The checks can also be run one at a time against your own report, which
may print to any stream:

```python
import io
from suitool.doctor import CheckReport, check_data_dir, check_path_variables

report = CheckReport(stream=io.StringIO())
report.check("data directory exists", check_data_dir("/tmp"))
check_path_variables(report, "/opt/bin", "/usr/bin:/opt/bin", home="/home/me")
print(report.summary())
```

The other checks are `check_config_files(report, installed_path,
default_path)`, `check_dependencies(report)` (runs `rustc`, `cargo` and
`git` with `--version`) and `check_network_connectivity(report, url)`
(defaults to `https://api.github.com`).

## What it does not do

`suitool` has no command-line program. It does not download, install,
update or remove binaries, does not switch or record default versions, and
does not clean up caches; it only parses specs, renders tables, reads and
writes JSON files and runs the diagnostic checks above. The caller supplies
the data directory, binary directory and state-file paths.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
directory.