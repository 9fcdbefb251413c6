from dataclasses import dataclass
from typing import Generic
from typing import TypeVar


T = TypeVar("T")


@dataclass(frozen=True)
class Option(Generic[T]):
    """An optional value, use it to pass a nullable parameter explicitly.

    Option::None renders as NULL, Option::Some(x) renders as x would.

        template.add_parameter("DeletedAt", Option(user.deleted_at))
    """

    # never access it directly, use Option.get_value()
    _value: T | None = None

    def __repr__(self) -> str:
        if self.has_value():
            return "Option::Some({!r})".format(self._value)
        return "Option::None"

    def has_value(self) -> bool:
        """Check if the Option contains a value or not."""
        return self._value is not None

    def get_value(self) -> T:
        """Attempt to get value, raises ValueError if missing."""
        if not self.has_value():
            msg = "Option did not contain a value. Use Option.has_value() before attempting Option.get_value()."
            raise ValueError(msg)
        return self._value

    def flatten(self) -> "Option":
        """Collapse nested Options, Option(Option(1)) -> Option(1), Option(Option()) -> Option()."""
        option = self
        while option.has_value() and isinstance(option._value, Option):
            option = option._value
        return option
