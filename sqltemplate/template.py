import dataclasses
import enum
import re

from loguru import logger

from . import util
from .error import DuplicateParameterName
from .error import InvalidParameterName
from .error import InvalidTemplate
from .error import NullParameterValue
from .error import NullTemplate
from .error import ParameterCountMismatch
from .error import PlaceholderNotFound
from .error import QueryBuildFailed
from .literal import format_parameter
from .literal import format_value
from .parameter import Parameter


# a name wrapped in braces, where the name itself has no braces
PLACEHOLDER_PATTERN = re.compile(r"\{[^{}]+\}")


class PlaceholderCheck(enum.StrEnum):
    # count every "{" in the template
    Braces = "braces"
    # count every distinct "{name}" token in the template
    Exact = "exact"


@dataclasses.dataclass(frozen=True)
class Config:
    placeholder_check: PlaceholderCheck = util.env("SQLTEMPLATE_PLACEHOLDER_CHECK:braces", convert=PlaceholderCheck)
    # reject None values in add_parameter
    strict_values: bool = util.env("SQLTEMPLATE_STRICT_VALUES:false", convert=util.to_bool)
    # substitute into the stored template, a second build will then fail
    consume_template: bool = util.env("SQLTEMPLATE_CONSUME_TEMPLATE:false", convert=util.to_bool)


def placeholder_count(template: str, check: PlaceholderCheck = PlaceholderCheck.Braces) -> int:
    if check == PlaceholderCheck.Exact:
        return len(set(PLACEHOLDER_PATTERN.findall(template)))
    return template.count("{")


class SqlTemplate:
    """Build an SQL query from a template with named placeholders.

        query = (
            SqlTemplate("SELECT * FROM Users WHERE Name = {Name} AND Age = {Age}")
            .add_parameter("Name", "John")
            .add_parameter("Age", 30)
            .build_query()
        )
        # SELECT * FROM Users WHERE Name = 'John' AND Age = 30

    Values are inlined as literals, see `literal.format_value`. Instances are
    not thread safe, guard a shared instance with a lock.
    """

    def __init__(self, template: str, config: Config | None = None):
        if template is None:
            raise NullTemplate("A SQL template is required.")

        if not isinstance(template, str) or not template.strip():
            raise InvalidTemplate("The SQL template can't be empty or whitespace.", {"template": template})

        self.config = config or Config()
        self._template = template
        self._parameters: list[Parameter] = []

    def __repr__(self) -> str:
        return "SqlTemplate(template={!r}, parameters={})".format(self._template, len(self._parameters))

    @property
    def template(self) -> str:
        return self._template

    @property
    def parameters(self) -> tuple[Parameter, ...]:
        return tuple(self._parameters)

    def get_parameters(self) -> tuple[Parameter, ...]:
        """Return a snapshot of the parameters, in the order they were added."""
        return self.parameters

    def add_parameter(self, name: str, value) -> "SqlTemplate":
        """Add a named parameter, it will replace every "{name}" in the template.

        Raises InvalidParameterName for empty names, and NullParameterValue
        for None values if the config has `strict_values` set.
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidParameterName("The parameter name can't be empty or whitespace.", {"name": name})

        if value is None and self.config.strict_values:
            raise NullParameterValue("The parameter {} requires a value.".format(name), {"name": name})

        self._parameters.append(Parameter(name, value))
        logger.debug("Added parameter {} to SQL template", name)
        return self

    def format_parameter(self, parameter: Parameter) -> str:
        return format_parameter(parameter)

    def build_query(self) -> str:
        """Substitute every parameter into the template and return the query.

        Any failure is raised as QueryBuildFailed, with the original error as
        its cause.
        """
        try:
            expected = placeholder_count(self._template, self.config.placeholder_check)
            found = len(self._parameters)
            if found != expected:
                err = "Expected {} parameters, but found {}.".format(expected, found)
                raise ParameterCountMismatch(err, {"expected": expected, "found": found})

            if self.config.consume_template:
                query = self._consume()
            else:
                query = self._render()

        except Exception as ex:
            logger.error(ex)
            raise QueryBuildFailed("Error occurred while building the SQL query.") from ex

        logger.debug("Built SQL query with {} parameter(s)", len(self._parameters))
        return query

    def _check_placeholder(self, parameter: Parameter, template: str):
        if parameter.placeholder not in template:
            err = "Placeholder '{}' not found in the SQL template.".format(parameter.placeholder)
            raise PlaceholderNotFound(err, {"token": parameter.placeholder})

    def _render(self) -> str:
        # format every value first, then replace all tokens in one pass so
        # substituted text is never scanned for placeholders again
        literals = {}
        for parameter in self._parameters:
            if parameter.placeholder in literals:
                err = "The parameter {} was added more than once.".format(parameter.name)
                raise DuplicateParameterName(err, {"name": parameter.name})

            self._check_placeholder(parameter, self._template)
            literals[parameter.placeholder] = format_value(parameter.value)

        if not literals:
            return self._template

        # longest first, so a token is never shadowed by a shorter one
        tokens = sorted(literals, key=len, reverse=True)
        pattern = re.compile("|".join(re.escape(token) for token in tokens))
        return pattern.sub(lambda match: literals[match.group(0)], self._template)

    def _consume(self) -> str:
        # substitutions made before a failure stay applied
        for parameter in self._parameters:
            self._check_placeholder(parameter, self._template)
            self._template = self._template.replace(parameter.placeholder, format_value(parameter.value))
        return self._template
