"""Registry of the options the wrapper accepts and where they may appear."""

from sqlite_fdw.models.options import OptionContext, OptionDescriptor, OptionKey

VALID_OPTIONS: tuple[OptionDescriptor, ...] = tuple(
    OptionDescriptor(name=key.value, context=key.context) for key in OptionKey
)


def is_valid_option(name: str, context: OptionContext) -> bool:
    """Check whether `name` is a legal option for objects of kind `context`."""
    return any(opt.name == name and opt.context == context for opt in VALID_OPTIONS)


def valid_option_names(context: OptionContext) -> tuple[str, ...]:
    """List the options legal in `context`, in registration order."""
    return tuple(opt.name for opt in VALID_OPTIONS if opt.context == context)
