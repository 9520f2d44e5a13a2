"""Test suite for the immutable domain values."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.domain.models import (
    Configuration,
    Execution,
    ExecutionError,
    ExecutionErrorKind,
    filepaths,
    make_config,
)


class TestConfiguration:
    @pytest.mark.parametrize(
        "paths",
        [[], ["only"], ["/path/1", "/path/2"], ["same", "same", "other"]],
    )
    def test_filepaths_of_make_config_is_identity(self, paths):
        assert filepaths(make_config(paths)) == paths

    def test_make_config_accepts_any_iterable(self):
        config = make_config(p for p in ("x", "y"))

        assert config.filepaths == ("x", "y")

    def test_configuration_is_frozen(self):
        config = make_config(["a"])

        with pytest.raises(ValidationError):
            config.filepaths = ("b",)

    def test_equal_configurations_compare_equal(self):
        assert make_config(["a", "b"]) == Configuration(filepaths=("a", "b"))


class TestExecutionValues:
    def test_execution_holds_stdout(self):
        assert Execution(stdout="hello\n").stdout == "hello\n"

    def test_execution_error_is_frozen(self):
        err = ExecutionError(kind=ExecutionErrorKind.OTHER, message="boom")

        with pytest.raises(ValidationError):
            err.message = "changed"

    def test_kind_accepts_its_string_value(self):
        err = ExecutionError(kind="file_not_found", message="x")

        assert err.kind is ExecutionErrorKind.FILE_NOT_FOUND
