"""
Tests for option validation
"""

import pytest

from sqlite_fdw.errors import ErrorKind, FdwError
from sqlite_fdw.models.options import OptionContext
from sqlite_fdw.validator import validate_options


class TestValidOptionLists:
    """Option lists that must be accepted"""

    def test_empty(self):
        validate_options([], OptionContext.SERVER)
        validate_options([], OptionContext.WRAPPER)

    def test_server_database(self):
        validate_options([("database", "/tmp/app.db")], OptionContext.SERVER)

    def test_table_table(self):
        validate_options([("table", "events")], OptionContext.TABLE)

    def test_accepts_generator(self):
        validate_options((pair for pair in [("table", "events")]), OptionContext.TABLE)


class TestInvalidOptionName:
    """Unknown keys fail with a hint listing legal keys"""

    def test_unknown_key(self):
        with pytest.raises(FdwError) as exc_info:
            validate_options([("host", "localhost")], OptionContext.SERVER)

        err = exc_info.value
        assert err.kind is ErrorKind.INVALID_OPTION_NAME
        assert err.message == 'invalid option "host"'
        assert err.hint == "Valid options in this context are: database"
        assert err.sqlstate == "HV00D"

    def test_key_from_other_context(self):
        with pytest.raises(FdwError) as exc_info:
            validate_options([("database", "/tmp/app.db")], OptionContext.TABLE)

        assert exc_info.value.kind is ErrorKind.INVALID_OPTION_NAME
        assert exc_info.value.hint == "Valid options in this context are: table"

    def test_none_placeholder(self):
        with pytest.raises(FdwError) as exc_info:
            validate_options([("table", "events")], OptionContext.WRAPPER)

        assert exc_info.value.hint == "Valid options in this context are: <none>"

    def test_user_mapping_has_no_options(self):
        with pytest.raises(FdwError) as exc_info:
            validate_options([("user", "alice")], OptionContext.USER_MAPPING)

        assert exc_info.value.hint == "Valid options in this context are: <none>"

    def test_unknown_key_after_valid_one(self):
        with pytest.raises(FdwError) as exc_info:
            validate_options([("table", "events"), ("schema", "main")], OptionContext.TABLE)

        assert exc_info.value.message == 'invalid option "schema"'


class TestDuplicateOption:
    """A key given twice fails regardless of its values"""

    def test_different_values(self):
        with pytest.raises(FdwError) as exc_info:
            validate_options([("table", "a"), ("table", "b")], OptionContext.TABLE)

        err = exc_info.value
        assert err.kind is ErrorKind.DUPLICATE_OPTION
        assert err.message == "redundant options: table (b)"
        assert err.sqlstate == "42601"

    def test_equal_values(self):
        with pytest.raises(FdwError) as exc_info:
            validate_options(
                [("database", "/tmp/app.db"), ("database", "/tmp/app.db")],
                OptionContext.SERVER,
            )

        assert exc_info.value.kind is ErrorKind.DUPLICATE_OPTION
        assert exc_info.value.message == "redundant options: database (/tmp/app.db)"
