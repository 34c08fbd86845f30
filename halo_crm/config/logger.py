"""Centralized logger for Halo CRM."""

from datetime import datetime
from typing import Any

from rich.console import Console

from .env import get_log_level

console = Console(stderr=True)

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}


def _current_level() -> int:
    level = get_log_level()
    if level == "warning":
        level = "warn"
    return LEVELS.get(level, 20)


def _format_value(value: Any, max_length: int = 120) -> str:
    if value is None:
        return "None"
    s = str(value)
    if len(s) > max_length:
        return s[:max_length] + "..."
    return s


def log(level: str, context: str, message: str, **data):
    if LEVELS.get(level, 0) < _current_level():
        return

    timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
    colors = {"debug": "dim", "info": "cyan", "warn": "yellow", "error": "red bold"}
    color = colors.get(level, "white")

    data_str = ""
    if data:
        data_str = " | " + ", ".join(f"{k}={_format_value(v)}" for k, v in data.items())

    console.print(
        f"[dim]{timestamp}[/dim] [{color}]{level.upper().ljust(5)}[/{color}] "
        f"[blue][{context}][/blue] {message}{data_str}",
        markup=True,
        highlight=False,
    )


def debug(context: str, message: str, **data):
    log("debug", context, message, **data)


def info(context: str, message: str, **data):
    log("info", context, message, **data)


def warn(context: str, message: str, **data):
    log("warn", context, message, **data)


def error(context: str, message: str, **data):
    log("error", context, message, **data)
