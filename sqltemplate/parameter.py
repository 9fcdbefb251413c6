import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class Parameter:
    name: str  # without braces, the placeholder is "{name}"
    value: Any  # anything `literal.format_value` accepts, None renders as NULL

    @property
    def placeholder(self) -> str:
        return "{{{name}}}".format(name=self.name)
