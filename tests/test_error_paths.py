"""Error classes and their formatting."""

import errno

from sourcecheck.errors import (
    ConfigError,
    ScannerStateError,
    SourceCheckError,
    SourceReadError,
)


class TestSourceReadError:
    def test_perror_format(self) -> None:
        err = SourceReadError("main.cpp", "No such file or directory", errno.ENOENT)
        assert str(err) == "main.cpp: No such file or directory"
        assert err.errno == errno.ENOENT

    def test_default_text(self) -> None:
        assert str(SourceReadError("a.c")) == "a.c: read error"

    def test_from_os_error(self) -> None:
        cause = FileNotFoundError(errno.ENOENT, "No such file or directory", "a.c")
        err = SourceReadError.from_os_error("a.c", cause)
        assert err.strerror == "No such file or directory"
        assert err.errno == errno.ENOENT
        assert err.__cause__ is cause

    def test_from_os_error_without_strerror(self) -> None:
        err = SourceReadError.from_os_error("a.c", OSError("disk gone"))
        assert str(err) == "a.c: disk gone"

    def test_is_sourcecheck_error(self) -> None:
        assert isinstance(SourceReadError("x"), SourceCheckError)


class TestOtherErrors:
    def test_config_error_key(self) -> None:
        err = ConfigError("expected a positive integer", key="jobs")
        assert str(err) == "'jobs': expected a positive integer"
        assert err.key == "jobs"

    def test_config_error_without_key(self) -> None:
        assert str(ConfigError("bad")) == "bad"

    def test_hierarchy(self) -> None:
        assert issubclass(ConfigError, SourceCheckError)
        assert issubclass(ScannerStateError, SourceCheckError)
