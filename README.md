# zbplugins

Building blocks for a group-chat bot: a command line that builds, saves and
loads the bot's connection configuration, a coloured log formatter, and the
transport-free logic behind a collection of chat plugins (emoji mixing,
fortune slips, gacha draws, drift bottles, video link summaries and more).

Only the Python standard library is used; Python 3.10 or later is required.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `zbplugins` command.

```
zbplugins [-d] [-w] [-h] [-t TOKEN] [-u URL] [-n NAME] [-p PREFIX]
          [-c FILE] [-s FILE] [USER ...]
```

| Option | Meaning | Default |
|--------|---------|---------|
| `-d` | log at debug level and higher | off |
| `-w` | log at warning level and higher (wins over `-d`) | off |
| `-h` | print the banner and usage, then exit | |
| `-t` | access token of the WebSocket client | empty |
| `-u` | URL of the WebSocket client | `ws://127.0.0.1:6700` |
| `-n` | first nickname (`小莉` is always added as the second) | `椛椛` |
| `-p` | command prefix | `/` |
| `-c` | read the configuration from a JSON file | |
| `-s` | save the configuration built from the flags to a JSON file and exit | |

Positional arguments that are 64-bit decimal integers become super users;
anything else is ignored. Without `-d` or `-w` the log level is info. On
Windows log records are written through `ColorFormatter`.

Write a config file once and run from it afterwards:

```
zbplugins -u ws://127.0.0.1:6700 -n 椛椛 -s config.json 12345678
zbplugins -c config.json
```

The JSON file has a `zero` object (`nickname`, `command_prefix`,
`super_users`, plus any other keys, which are kept as they are) and a `ws`
list of `{"Url": ..., "AccessToken": ...}` objects.

The same pieces are available from Python in `zbplugins.cli`: `WSClient`,
`BotConfig` (with `to_dict` and `from_dict`), `parse_super_users`, `banner`,
`build_config`, `load_config`, `save_config` and `main`.

```python
from zbplugins.cli import build_config, save_config, load_config, banner

config = build_config(["-n", "bot", "12345678"])
save_config(config, "config.json")
assert load_config("config.json").to_dict() == config.to_dict()
print(banner())
```

## Logging

`zbplugins.logformat.ColorFormatter` is a `logging.Formatter` that renders
each record as `[LEVEL] message \n` wrapped in the ANSI colour given by
`level_color(levelno)` and followed by a colour reset. The record already
ends in a newline, so set the handler's terminator to an empty string.

```python
import logging
from zbplugins.logformat import ColorFormatter

handler = logging.StreamHandler()
handler.terminator = ""
handler.setFormatter(ColorFormatter())
logging.getLogger().addHandler(handler)
```

## Plugin logic

Each module holds the logic of one bot feature, free of any chat transport,
so it can be wired into whatever bot framework you run. Functions that make
random choices take an `rng` argument — any object with the interface of
`random.Random` — so results can be reproduced.

- `zbplugins.emojimix` — `Segment` (a message element), `face_to_emoji`,
  `match` (find two mixable emoji in a message) and `mix_urls` (the two
  candidate Emoji Kitchen image URLs; raises `ValueError` for emoji that
  cannot be mixed).
- `zbplugins.choose` — `choose(args, nickname, rng)` splits on `还是`, picks
  one option and returns the reply text.
- `zbplugins.chat` — `name_reply`, `PokeGuard` (a per-group token bucket;
  `react` returns a reply or `None` when poked too often) and
  `AirConditioner` (`turn_on`, `turn_off`, `set_temperature`, `report`).
- `zbplugins.fortune` — the fortune slip backgrounds (`background_index`
  raises `ValueError` for an unknown name) and vertical text placement:
  `layout` returns `(char, x, y)` for every character; `offset` and
  `rows_num` are its helpers.
- `zbplugins.genshin` — `Storage` (the pool mode bit), `GachaPool.draw`
  (returns the drawn cards in display order, the five-star announcement
  text and whether anything five-star came up), `card_name` and
  `reply_text`.
- `zbplugins.bilibili` — `cut_url`, `video_query`, `row`, `format_video`
  (builds the summary message from a video API `data` object), `Medal`
  (with `from_dict`), `sort_medals`, `merge_vups`, `int_to_rgb`, and
  `VupStore`, a SQLite store of `Vup` records and the API cookie
  (`insert_vup`, `filter_vups`, `set_cookie`, `get_cookie`, `close`;
  usable as a context manager).
- `zbplugins.driftbottle` — `Sea`, one SQLite table of `Bottle`s per
  channel (`create_channel`, `throw`, `fetch`, `destroy`, `count`, `close`;
  a context manager), the exceptions `NoSuchChannel` and `BottleNotFound`,
  CRC-64/ISO bottle ids (`crc64_iso`, `bottle_id`) and command parsing
  (`parse_throw`, `parse_fetch`).
- `zbplugins.epidemic` — `Area.from_dict` builds an area tree from the
  statistics API, `find_city` searches it and `format_report` renders one
  area.
- `zbplugins.atri` — `is_awake`, `morning_replies`, `noon_replies`,
  `night_replies` (candidate replies for an hour of the day) and `pick`.
- `zbplugins.ratelimit` — `parse_limit_command` (raises `ValueError` for an
  out-of-range interval or burst), `pack_limit` and `unpack_limit`.
- `zbplugins.replymode` — `session_id`, `ModeStore` (`get_reply_mode`,
  `set_reply_mode`) and `TTSModes` (`names`, `get`, `set`, `set_default`).
- `zbplugins.stories` — `parse_cp_names`, `cp_story` and
  `abstract_translate`, which takes the pronunciation and emoji lookups as
  functions.

## What this package does not do

- The `zbplugins` command only builds, saves or loads the configuration and
  logs it. It does not connect to the WebSocket endpoint, receive messages
  or run a bot.
- No module makes network requests. Video data, follower counts, epidemic
  statistics and the like must be fetched by the caller and passed in;
  emoji mix URLs are built but not checked.
- Nothing renders images: fortune slips give text positions and gacha draws
  give the file names of the artwork, not finished pictures.
- No AI reply engine or speech synthesis is included; `replymode` only
  keeps track of which one each session has chosen.
- Story templates, pronunciation and emoji tables are not shipped; the
  caller supplies them.