"""Tests for logging configuration and hooks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
from refpath import (
    AbsoluteDirectoryPath,
    Ok,
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    host_policy,
    remove_log_hook,
)

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def cleanup_hooks() -> Generator[None]:
    """Clear log hooks before and after each test."""
    clear_log_hooks()
    yield
    clear_log_hooks()


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self) -> None:
        """Registered hooks receive log entry dicts."""
        received: list[dict[str, Any]] = []

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        get_logger('test').info('sample_event', extra_field='extra_value')

        entries = [e for e in received if e.get('event') == 'sample_event']
        assert len(entries) == 1
        assert entries[0]['extra_field'] == 'extra_value'
        assert entries[0]['level'] == 'info'

    def test_remove_hook(self) -> None:
        """remove_log_hook() stops the hook from being called."""
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append(event_dict['event'])

        configure_logging(level='DEBUG')
        add_log_hook(hook)
        logger = get_logger('test')
        logger.info('first')
        remove_log_hook(hook)
        logger.info('second')

        assert calls == ['first']

    def test_remove_unknown_hook_is_noop(self) -> None:
        remove_log_hook(lambda e: None)

    def test_hook_exception_does_not_break_logging(self) -> None:
        """A failing hook neither raises nor starves the hooks after it."""
        calls: list[str] = []

        def bad_hook(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('hook failed')

        configure_logging(level='DEBUG')
        add_log_hook(bad_hook)
        add_log_hook(lambda e: calls.append('good'))

        get_logger('test').info('sample_event')

        assert calls == ['good']

    def test_level_filters_events(self) -> None:
        received: list[dict[str, Any]] = []

        configure_logging(level='WARNING')
        add_log_hook(received.append)
        get_logger('test').debug('quiet')

        assert received == []


class TestLibraryEvents:
    """Events emitted by the filesystem binders."""

    def test_directory_ensured(self, tmp_path) -> None:
        received: list[dict[str, Any]] = []

        configure_logging(level='DEBUG')
        add_log_hook(received.append)
        target = AbsoluteDirectoryPath.create(str(tmp_path / 'new'), policy=host_policy()).unwrap()
        target.ensure_exists()

        events = [e for e in received if e['event'] == 'directory_ensured']
        assert len(events) == 1
        assert events[0]['path'] == target.path

    def test_callback_failure_is_logged(self, tmp_path) -> None:
        received: list[dict[str, Any]] = []

        def explode(d: Any) -> Any:
            raise RuntimeError('boom')

        configure_logging(level='DEBUG')
        add_log_hook(received.append)
        AbsoluteDirectoryPath.create(str(tmp_path), policy=host_policy()).unwrap().bind_existing(explode)

        failures = [e for e in received if e['event'] == 'callback_failed']
        assert len(failures) == 1
        assert failures[0]['level'] == 'warning'
        assert 'boom' in failures[0]['error']

    def test_path_error_is_logged_as_record(self, tmp_path) -> None:
        """A PathError in an event reaches hooks as its ErrorInfo fields."""
        received: list[dict[str, Any]] = []
        (tmp_path / 'taken').write_text('x')

        configure_logging(level='DEBUG')
        add_log_hook(received.append)
        target = AbsoluteDirectoryPath.create(str(tmp_path / 'taken'), policy=host_policy()).unwrap()
        target.bind_existing(lambda d: pytest.fail('must not run'))

        refusals = [e for e in received if e['event'] == 'wrong_kind']
        assert len(refusals) == 1
        assert refusals[0]['level'] == 'warning'
        assert refusals[0]['path'] == target.path
        assert refusals[0]['error']['kind'] == 'wrong_kind'
        assert 'existing file' in refusals[0]['error']['message']

    def test_missing_directory_is_debug(self, tmp_path) -> None:
        received: list[dict[str, Any]] = []

        configure_logging(level='DEBUG')
        add_log_hook(received.append)
        AbsoluteDirectoryPath.create(str(tmp_path / 'nope'), policy=host_policy()).unwrap().bind_existing(Ok)

        missing = [e for e in received if e['event'] == 'directory_missing']
        assert [e['level'] for e in missing] == ['debug']
        assert missing[0]['error']['kind'] == 'not_found'
