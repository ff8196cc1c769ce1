"""structlog setup for refpath events.

refpath emits a few snake_case events (``directory_ensured``, ``wrong_kind``,
``callback_failed``, ...) through stdlib loggers named after its modules, with
the offending path and, where one exists, the PathError as key-value context.
Importing refpath configures nothing. ``configure_logging`` (or
``refpath.init(log_level=...)``) installs one handler that renders refpath
events and foreign stdlib records alike.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import msgspec
import structlog

from refpath.errors import PathError

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

type LogHook = Callable[[dict[str, Any]], None]

_hooks: list[LogHook] = []
_handler: logging.Handler | None = None


def _path_errors_as_records(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Replace PathError values by their ErrorInfo record as plain builtins."""
    for key, value in event_dict.items():
        if isinstance(value, PathError):
            event_dict[key] = msgspec.to_builtins(value.to_struct())
    return event_dict


def _call_hooks(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    for hook in tuple(_hooks):
        try:
            hook(dict(event_dict))
        except Exception:  # noqa: BLE001, S110
            pass  # logging from here would re-enter the hooks
    return event_dict


def _pre_chain() -> list[Any]:
    """Processors shared by structlog events and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt='iso', utc=True),
        structlog.stdlib.ExtraAdder(),
        _path_errors_as_records,
        _call_hooks,
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Route refpath events to stderr through a structlog ProcessorFormatter.

    Calling it again replaces the handler installed by the previous call;
    handlers installed by the application are left alone.

    Args:
        level: Root logging level ("DEBUG", "INFO", "WARNING", ...).
        json_output: Render JSON lines; otherwise use the console renderer.
    """
    global _handler

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _handler = handler


def get_logger(name: str | None = None) -> Any:
    """A structlog logger over the stdlib logger ``name``.

    Until logging is configured, events are filtered by stdlib levels, so an
    application that never configures logging hears nothing below WARNING.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


def add_log_hook(hook: LogHook) -> None:
    """Call ``hook`` with a copy of every event dict, after PathErrors are rendered.

    A hook that raises is ignored for that event.
    """
    _hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    if hook in _hooks:
        _hooks.remove(hook)


def clear_log_hooks() -> None:
    _hooks.clear()
