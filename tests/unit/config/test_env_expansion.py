"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from vehicle_patterns.config.utils import expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("$TEST_VAR") == "/test/path"

    def test_expand_braced_env_var_with_subpath(self):
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("${TEST_VAR}/subdir") == "/test/path/subdir"

    def test_expand_nonexistent_env_var(self):
        assert expand_env_vars("$NONEXISTENT_VAR") == "$NONEXISTENT_VAR"

    def test_default_used_when_var_missing(self):
        assert expand_env_vars("${NONEXISTENT_VAR:DEBUG}") == "DEBUG"

    def test_default_ignored_when_var_set(self):
        with patch.dict(os.environ, {"TEST_LEVEL": "ERROR"}):
            assert expand_env_vars("${TEST_LEVEL:DEBUG}") == "ERROR"

    def test_expand_nested_dict_and_list_values(self):
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {
                "logging": {"file_path": "$TEST_VAR/app.log"},
                "paths": ["$TEST_VAR/a", "plain"],
            }
            assert expand_env_vars(config) == {
                "logging": {"file_path": "/test/path/app.log"},
                "paths": ["/test/path/a", "plain"],
            }

    def test_expand_non_string_values(self):
        config = {"number": 42, "boolean": True, "none": None}
        assert expand_env_vars(config) == config
