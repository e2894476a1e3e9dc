# vpnlist_updater

`vpnlist_updater` fetches a web page that lists VPN servers, picks out the links
to OpenVPN profiles and downloads the ones that use the protocols you want.
Messages printed by the command are in Russian.

## Installation

```
pip install .
```

## Usage

```
vpnlist-updater [--settings FILE] [--output-dir DIR] [--wait SECONDS]
```

- `--settings` — the settings file (default `settings.yaml` in the current
  directory).
- `--output-dir` — where profiles are saved (default: the current directory).
- `--wait` — seconds to count down before exiting (default 15).

If the settings file does not exist, the program creates it with the defaults:

```yaml
url: https://vpnobratno.info/russia_server_list.html
proto_types:
- UDP
```

- `url` is the page that holds the server list. Every link on it of the form
  `<a href="...">...</a>` counts as a server. The protocol is taken from the
  link text, ignoring case: text containing `UDP` means UDP, otherwise text
  containing `TCP` means TCP, and any other text means `Unknown`.
- `proto_types` lists the protocols to download: any of `UDP`, `TCP`,
  `Unknown`.

If the file cannot be read, is not valid YAML, lacks a field, names an unknown
protocol, or has an empty `url` together with an empty `proto_types`, the
defaults are used and a message says so. The settings in effect are printed.

All selected profiles are downloaded concurrently. Each file gets its name from
the quoted `filename="..."` in the response's `Content-Disposition` header.
Without one, the name is made from the letters and digits of the URL, with
`.ovpn` added. Existing files are overwritten. At the end the program prints
how many files it created and how many it updated; failed downloads are
reported one by one.

Then the program counts down and exits. If a key is pressed on the terminal
during the countdown, it stays open showing a spinner until you press Ctrl+C
(exit status 130). When standard input is not a terminal, key presses are not
watched and the program simply exits after the countdown.

## Using it from Python

```python
from vpnlist_updater.listing import parse_body
from vpnlist_updater.settings import ProtoType
from vpnlist_updater.cli import select_urls

servers = parse_body('<a href="https://example.com/a.ovpn">Server UDP</a>')
urls = select_urls(servers, [ProtoType.UDP])
```

- `vpnlist_updater.settings`: `AppSettings` (with `default()`, `to_yaml()`,
  `from_yaml()`, the last raising `ValueError` on bad input), `ProtoType`,
  `load_settings(path)` and `create_settings_file(path, settings)`.
- `vpnlist_updater.listing`: `parse_body(source)` returns `(ProtoType, url)`
  pairs in page order; `find_next(source, index)` finds one anchor at a time.
- `vpnlist_updater.network`: `fetch_raw_data(url, client=None)` returns the
  page text; `save_to_file(url, client=None, directory=".")` returns the file
  name and whether the file already existed. Both accept an optional
  `httpx.AsyncClient` and raise `DownloadError` when the request fails;
  `save_to_file` also raises it when the file cannot be written.
  `name_from_content_disposition` and `name_from_url` are the naming rules.
- `vpnlist_updater.cli`: `download_all(urls, client=None, directory=".")`
  returns an `Outcome` (`CREATED`, `UPDATED`, `FAILED`) per URL; `finish` and
  `main` drive the command.

HTTP error statuses are not treated as failures: whatever body the server
returns is used as the page or saved as the profile.

## Running the tests

```
pip install ".[test]"
pytest
```