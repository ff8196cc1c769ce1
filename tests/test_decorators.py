"""Tests for decorators: @safe and @result."""

import pytest
from refpath import AbsoluteDirectoryPath, Err, FileName, NotRootedError, Ok, result, safe


class TestSafeDecorator:
    """Tests for @safe decorator."""

    def test_safe_returns_ok_on_success(self):
        """@safe wraps successful return in Ok."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        assert divide(10, 2) == Ok(5.0)

    def test_safe_returns_err_on_exception(self):
        """@safe catches exception and returns Err."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        outcome = divide(10, 0)
        assert isinstance(outcome, Err)
        assert isinstance(outcome.error, ZeroDivisionError)

    def test_safe_with_exceptions_param(self):
        """@safe(exceptions=...) catches only specified exceptions."""

        @safe(exceptions=(OSError,))
        def touch(kind: str) -> str:
            if kind == 'os':
                raise PermissionError('denied')
            if kind == 'type':
                raise TypeError('bad')
            return kind

        assert touch('ok') == Ok('ok')
        assert isinstance(touch('os').error, PermissionError)
        with pytest.raises(TypeError):
            touch('type')

    def test_safe_preserves_function_name(self):
        """@safe preserves function metadata."""

        @safe
        def my_function():
            pass

        assert my_function.__name__ == 'my_function'

    def test_safe_with_kwargs(self):
        """@safe works with keyword arguments."""

        @safe
        def greet(name: str, greeting: str = 'Hello') -> str:
            return f'{greeting}, {name}!'

        assert greet('World') == Ok('Hello, World!')
        assert greet(name='Python', greeting='Hi') == Ok('Hi, Python!')

    def test_safe_wraps_existing_callable(self):
        """safe can wrap a function after the fact, as around os calls."""
        parse_int = safe(exceptions=(ValueError,))(int)
        assert parse_int('12') == Ok(12)
        assert parse_int('x').is_err()


class TestResultDecorator:
    """Tests for @result decorator."""

    def test_bail_on_ok_continues(self):
        """.bail() on Ok unwraps and execution continues."""

        @result
        def config_file(raw_dir: str, raw_name: str):
            directory = AbsoluteDirectoryPath.create(raw_dir).bail()
            name = FileName.create(raw_name).bail()
            return Ok(directory.combine_file_name(name))

        assert config_file('/etc/app', 'app.toml').unwrap().path == '/etc/app/app.toml'

    def test_bail_on_err_returns_err(self):
        """.bail() on Err returns it from the decorated function."""
        reached = []

        @result
        def config_file(raw_dir: str):
            directory = AbsoluteDirectoryPath.create(raw_dir).bail()
            reached.append(directory)
            return Ok(directory)

        outcome = config_file('etc/app')
        assert isinstance(outcome.error, NotRootedError)
        assert reached == []

    def test_result_preserves_function_name(self):
        @result
        def compute():
            return Ok(1)

        assert compute.__name__ == 'compute'

    def test_result_does_not_catch_other_exceptions(self):
        """Only Propagate is intercepted."""

        @result
        def broken():
            raise KeyError('k')

        with pytest.raises(KeyError):
            broken()
