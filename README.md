# bybitclient

A small, synchronous client for the public endpoints of the Bybit v5 REST API,
with a command line front end. No API key is needed. It covers:

- announcements (`/v5/announcements/index`)
- system status and maintenance windows (`/v5/system/status`)
- server time (`/v5/market/time`)
- candlesticks (`/v5/market/kline`)

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

The package is split into four modules:

- `bybitclient.client` – `BybitClient` and `DEFAULT_BASE_URL`
- `bybitclient.params` – `AnnouncementParams`, `KlineParams`, `SystemStatusParams`
- `bybitclient.models` – frozen dataclasses for the replies
  (`AnnouncementResult`, `Announcement`, `AnnouncementType`,
  `SystemStatusResult`, `SystemStatus`, `MarketTimeResult`, `KlineResult`,
  `BybitResponse`), each with a `from_dict` class method
- `bybitclient.errors` – the exception classes

```python
from bybitclient.client import BybitClient
from bybitclient.errors import ApiError, BybitError
from bybitclient.params import AnnouncementParams, KlineParams, SystemStatusParams

with BybitClient() as client:  # uses DEFAULT_BASE_URL, the production API
    now = client.get_market_time()
    print(now.time_second, now.time_nano)  # strings, as the exchange sends them

    params = KlineParams("BTCUSDT", "60", category="spot", start=1700000000000, limit=10)
    klines = client.get_kline(params)
    print(klines.category, klines.symbol)  # either may be None
    for candle in klines.list:
        print(candle)  # a list of strings

    announcements = client.get_announcements(AnnouncementParams("en-US"))
    print("total:", announcements.total)
    for item in announcements.list:
        print(item.title, "|", item.url, "|", item.type_info.key)

    try:
        status = client.get_system_status(SystemStatusParams())
    except ApiError as exc:
        print("the exchange refused the request:", exc.code, exc.msg)
    except BybitError as exc:
        print("request failed:", exc)
    else:
        for entry in status.list:
            print(entry.id, entry.title, entry.begin, "->", entry.end)
```

`BybitClient` takes an optional base URL, for instance a test server:

```python
client = BybitClient("http://localhost:8080")
```

A trailing slash on the base URL is ignored. Used as a context manager, the
client closes its HTTP session on exit.

### Query parameters

Each parameter class has a `to_query()` method returning the `(name, value)`
pairs that are sent, in order. Optional fields are sent only when they are
set, so `SystemStatusParams()` sends no query string at all.

| Class | Required | Optional (query name) |
|---|---|---|
| `AnnouncementParams` | `locale` | `type_key` (`type`), `tag`, `page`, `limit` |
| `KlineParams` | `symbol`, `interval` | `category`, `start`, `end`, `limit` |
| `SystemStatusParams` | – | `id`, `state` |

### Errors

All errors derive from `BybitError`:

- `HttpError` – the request failed or the server answered with an error
  status; the underlying exception is in `.error`.
- `JsonError` – the body is not JSON, or the JSON does not have the expected
  fields and types (integers are also checked against their ranges).
- `ApiError` – the reply carried a non-zero `retCode`; see `.code` and `.msg`.
- `MissingFieldError` – the reply was successful but had no `result`; the
  field name is in `.field`.

## Command line

Installing the package installs a `bybitclient` command:

```
bybitclient --help
bybitclient market-time
bybitclient announcements --locale en-US --limit 5
bybitclient kline BTCUSDT 60 --category spot --limit 10
bybitclient system-status --state completed
```

Subcommands and options:

- `announcements` – `--locale` (default `en-US`), `--type`, `--tag`,
  `--page`, `--limit`. Prints `total: N`, then `title | url` per entry.
- `kline [SYMBOL] [INTERVAL]` – symbol defaults to `BTCUSDT`, interval to
  `60`; `--category` (default `spot`), `--start` (default `1700000000000`),
  `--end`, `--limit` (default `10`). Prints the category and symbol
  (`unknown` when absent), then one candle per line.
- `market-time` – prints `timeSecond` and `timeNano`.
- `system-status` – `--id`, `--state`. Prints the entry count, then id,
  title, begin/end, `env` and `maintainType` per entry.

`--base-url` (before the subcommand) selects another server. On any
`BybitError` the command prints `error: ...` to standard error and exits
with status 1.

## What this package does not do

It only reaches the four public endpoints above. There is no request signing,
so no account, order or position endpoints; no WebSocket streams; and no
asynchronous client. Replies are not cached or stored anywhere.