"""Validation of option lists before they are committed to the catalog."""

import logging
from collections.abc import Iterable

from sqlite_fdw.catalog import is_valid_option, valid_option_names
from sqlite_fdw.errors import ErrorKind, FdwError
from sqlite_fdw.models.options import OptionContext, OptionKey, OptionPair

logger = logging.getLogger(__name__)


def validate_options(options: Iterable[OptionPair], context: OptionContext) -> None:
    """Check an option list for a server, table or other wrapper object.

    Must run once per statement that creates or alters an object, before its
    options are stored.

    Raises:
        FdwError: `INVALID_OPTION_NAME` for a key not legal in `context`, with a
            hint listing the legal keys; `DUPLICATE_OPTION` for a key given twice.
    """
    logger.debug("validating %s options", context)
    seen: set[OptionKey] = set()

    for name, value in options:
        if not is_valid_option(name, context):
            names = valid_option_names(context)
            msg = f'invalid option "{name}"'
            hint = f"Valid options in this context are: {', '.join(names) or '<none>'}"
            raise FdwError(msg, kind=ErrorKind.INVALID_OPTION_NAME, hint=hint)

        key = OptionKey(name)
        if key in seen:
            msg = f"redundant options: {key} ({value})"
            raise FdwError(msg, kind=ErrorKind.DUPLICATE_OPTION)
        seen.add(key)
