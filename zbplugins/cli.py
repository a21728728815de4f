"""Command line entry: bot configuration from flags or a JSON file."""

from __future__ import annotations

import argparse
import json
import logging
import os
import re
from dataclasses import dataclass, field
from typing import Any

from .logformat import ColorFormatter

log = logging.getLogger(__name__)

DEFAULT_URL = "ws://127.0.0.1:6700"
DEFAULT_NICKNAME = "椛椛"
SECOND_NICKNAME = "小莉"
DEFAULT_PREFIX = "/"

_INFO = (
    "* OneBot + ZeroBot",
    "* Version 1.5.0-beta4 - 2022-07-13 12:24:13 +0800 CST",
)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def banner() -> str:
    """Return the version banner text."""
    return "\n".join(_INFO)


@dataclass
class WSClient:
    """A websocket connection target."""

    url: str = DEFAULT_URL
    access_token: str = ""


@dataclass
class BotConfig:
    """Bot settings plus the websocket clients it drives."""

    nickname: list[str] = field(default_factory=list)
    command_prefix: str = ""
    super_users: list[int] = field(default_factory=list)
    ws: list[WSClient] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        zero = {
            "nickname": list(self.nickname),
            "command_prefix": self.command_prefix,
            "super_users": list(self.super_users),
        }
        zero.update(self.extra)
        return {
            "zero": zero,
            "ws": [{"Url": w.url, "AccessToken": w.access_token} for w in self.ws],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BotConfig":
        zero = dict(data.get("zero") or {})
        nickname = list(zero.pop("nickname", None) or [])
        prefix = zero.pop("command_prefix", None) or ""
        users = [int(u) for u in zero.pop("super_users", None) or []]
        clients = [
            WSClient(url=w.get("Url", "") or "", access_token=w.get("AccessToken", "") or "")
            for w in data.get("ws") or []
        ]
        return cls(
            nickname=nickname,
            command_prefix=prefix,
            super_users=users,
            ws=clients,
            extra=zero,
        )


def parse_super_users(args: list[str]) -> list[int]:
    """Keep the arguments that are valid 64-bit decimal integers."""
    users = []
    for arg in args:
        if not _INT_RE.fullmatch(arg):
            continue
        value = int(arg)
        if _INT64_MIN <= value <= _INT64_MAX:
            users.append(value)
    return users


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="zbplugins", add_help=False)
    p.add_argument("-d", action="store_true", help="Enable debug level log and higher.")
    p.add_argument("-w", action="store_true", help="Enable warning level log and higher.")
    p.add_argument("-h", action="store_true", help="Display this help.")
    p.add_argument("-t", default="", metavar="TOKEN", help="Set AccessToken of WSClient.")
    p.add_argument("-u", default=DEFAULT_URL, metavar="URL", help="Set Url of WSClient.")
    p.add_argument("-n", default=DEFAULT_NICKNAME, metavar="NAME", help="Set default nickname.")
    p.add_argument("-p", default=DEFAULT_PREFIX, metavar="PREFIX", help="Set command prefix.")
    p.add_argument("-c", default="", metavar="FILE", help="Run from config file.")
    p.add_argument("-s", default="", metavar="FILE", help="Save default config to file and exit.")
    p.add_argument("users", nargs="*", help="Super user ids.")
    return p


def _config_from_options(opts: argparse.Namespace) -> BotConfig:
    if opts.c:
        config = load_config(opts.c)
        log.info("[main] 从 %s 读取配置文件", opts.c)
        return config
    return BotConfig(
        nickname=[opts.n, SECOND_NICKNAME],
        command_prefix=opts.p,
        super_users=parse_super_users(opts.users),
        ws=[WSClient(url=opts.u, access_token=opts.t)],
    )


def build_config(argv: list[str] | None) -> BotConfig:
    """Build the configuration from command line arguments."""
    return _config_from_options(_parser().parse_args(argv))


def load_config(path: str | os.PathLike) -> BotConfig:
    """Read a configuration from a JSON file."""
    with open(path, encoding="utf-8") as f:
        return BotConfig.from_dict(json.load(f))


def save_config(config: BotConfig, path: str | os.PathLike) -> None:
    """Write a configuration to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, ensure_ascii=False)
        f.write("\n")


def _setup_logging(debug: bool, warn: bool) -> None:
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        if os.name == "nt":
            handler.terminator = ""
            handler.setFormatter(ColorFormatter())
        root.addHandler(handler)
    if debug and not warn:
        root.setLevel(logging.DEBUG)
    elif warn:
        root.setLevel(logging.WARNING)
    else:
        root.setLevel(logging.INFO)


def main(argv: list[str] | None = None) -> int:
    parser = _parser()
    opts = parser.parse_args(argv)
    if opts.h:
        print(
            "\n======================[ZeroBot-Plugin]======================\n"
            + banner()
            + "\n============================================================\n"
        )
        print("Usage:")
        print(parser.format_help())
        return 0
    _setup_logging(opts.d, opts.w)
    config = _config_from_options(opts)
    if opts.s and not opts.c:
        save_config(config, opts.s)
        log.info("[main] 配置文件已保存到 %s", opts.s)
        return 0
    log.info(
        "[main] nickname=%s prefix=%s super_users=%s ws=%s",
        config.nickname,
        config.command_prefix,
        config.super_users,
        [w.url for w in config.ws],
    )
    return 0