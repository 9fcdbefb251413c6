import dataclasses
import os


TRUTHY = ("1", "true", "yes", "on")
FALSY = ("0", "false", "no", "off")


def to_bool(value: str) -> bool:
    """Convert an envvar string to a bool, raises ValueError if it's neither."""
    normalised = value.strip().lower()
    if normalised in TRUTHY:
        return True
    if normalised in FALSY:
        return False
    raise ValueError("Can't convert {!r} to a bool.".format(value))


def env(key, convert=str, **kwargs):
    """
    A factory around `dataclasses.field` that can be used to load or default
    an envvar. Values are read when the dataclass is instantiated, not when
    it's defined, so changes to os.environ are picked up by new instances.

    Args:
        key: in the format of either KEY or KEY:DEFAULT
        convert: a function that accepts a string and returns a different type
        kwargs: any kwargs to be passed to `dataclasses.field`

    Returns:
        dataclasses.field

    Raises:
        KeyError: in the event an envvar isn't found and doesn't have a default
    """
    key, partition, default = key.partition(":")

    def default_factory(key=key, default=default, convert=convert):
        if key in os.environ:
            return convert(os.environ[key])

        # if a partition was detected use anything after it, even an empty string
        if partition == ":":
            return convert(default)

        raise KeyError(key)

    return dataclasses.field(default_factory=default_factory, **kwargs)
