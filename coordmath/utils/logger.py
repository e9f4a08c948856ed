"""Loguru setup for a library: silent until ``configure()`` is called.

Importing coordmath never touches sinks owned by the host application.
Records from ``coordmath.*`` modules are disabled by default; ``configure()``
enables them and installs coordmath's own sinks, ``reset()`` removes exactly
those sinks again.
"""

from __future__ import annotations

import inspect
import sys
import threading
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from loguru import logger as _root_logger
from loguru._logger import Logger as LoguruLogger

from coordmath.config import LOG_FILE_PREFIX, LoggingConfig, get_settings

_PACKAGE = "coordmath"
_LOCK = threading.Lock()
_HANDLER_IDS: list[int] = []
_LOG_FILE: Optional[Path] = None
_FILE_HANDLE: Optional[TextIO] = None

_root_logger.disable(_PACKAGE)


# ---------- sinks as callables ----------
def _console_sink(msg) -> None:
    r = msg.record
    module = r["extra"].get("module", r.get("name", "unknown"))
    sys.stderr.write(
        f"{r['time']:%H:%M:%S} | {r['level'].name: <3.3} | {module} | {r['message']}\n"
    )


def _make_file_sink(fh: TextIO):
    def _file_sink(msg) -> None:
        r = msg.record
        module = r["extra"].get("module", r.get("name", "unknown"))
        fh.write(
            f"{r['time'].isoformat()} | {r['level'].name} | {module} | {r['message']}\n"
        )
        fh.flush()

    return _file_sink


def _remove_own_sinks() -> None:
    global _LOG_FILE, _FILE_HANDLE

    for handler_id in _HANDLER_IDS:
        _root_logger.remove(handler_id)
    _HANDLER_IDS.clear()
    if _FILE_HANDLE is not None:
        _FILE_HANDLE.close()
    _FILE_HANDLE = None
    _LOG_FILE = None


def _install_sinks(cfg: LoggingConfig) -> None:
    global _LOG_FILE, _FILE_HANDLE

    _remove_own_sinks()
    level = cfg.level.value
    _HANDLER_IDS.append(_root_logger.add(_console_sink, level=level, catch=True))

    if cfg.log_dir is not None:
        cfg.log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        _LOG_FILE = cfg.log_dir / f"{LOG_FILE_PREFIX}_{timestamp}.log"
        _FILE_HANDLE = _LOG_FILE.open("a", encoding="utf-8")
        _HANDLER_IDS.append(
            _root_logger.add(_make_file_sink(_FILE_HANDLE), level=level, catch=True)
        )
    _root_logger.enable(_PACKAGE)


def configure(level: str | None = None, log_dir: Path | str | None = None) -> None:
    """Enable coordmath logging and (re)install its sinks.

    Arguments override the environment settings. Sinks added by other code
    are left in place.
    """
    cfg = get_settings().logging
    cfg = LoggingConfig(
        level=level if level is not None else cfg.level,
        log_dir=Path(log_dir) if log_dir is not None else cfg.log_dir,
    )
    with _LOCK:
        _install_sinks(cfg)


def reset() -> None:
    """Remove coordmath's sinks and silence its records again."""
    with _LOCK:
        _remove_own_sinks()
        _root_logger.disable(_PACKAGE)


def get_logger(name: str | None = None) -> LoguruLogger:
    module_name = name
    if module_name is None:
        frame = inspect.currentframe()
        caller_frame = frame.f_back if frame is not None else None
        if caller_frame is not None:
            module = inspect.getmodule(caller_frame)
            if module is not None and module.__name__ != "__main__":
                module_name = module.__name__

    return _root_logger.bind(module=module_name or "unknown")


def current_log_file() -> Optional[Path]:
    return _LOG_FILE


__all__ = ["configure", "current_log_file", "get_logger", "reset"]
