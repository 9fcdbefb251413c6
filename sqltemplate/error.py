"""
Errors raised while building SQL from a template.

Every error declares a `title` (a generic one liner) and a `kind` (a slug).
The detail is a contextual one liner, and the context is an optional dict of
structured data about the failure.
"""


class SqlTemplateErrorMeta(type):
    """The SqlTemplateError Metaclass, this will validate your errors."""

    def __new__(cls, class_name, parents, attrs):  # noqa: D102
        _cls = type.__new__(cls, class_name, parents, attrs)

        # don't validate the base class
        if class_name == "SqlTemplateError":
            return _cls

        missing = []
        for key in ("title", "kind"):
            if key not in attrs:
                missing.append(key)

        if missing:
            fmt = "Can't build a SqlTemplateError: {} is missing the field(s): {}"
            raise Exception(fmt.format(class_name, ", ".join(missing)))

        def __init__(self, detail: str | None = None, context: dict | None = None):
            self.detail = detail or "No detail provided"
            self.context = context or {}
            Exception.__init__(self, self.detail)

        def __str__(self):
            return self.detail

        def __repr__(self):
            fmt = "<{}(kind='{}', title='{}', detail='{}')>"
            return fmt.format(self.__class__.__name__, self.kind, self.title, self.detail)

        def to_dict(self) -> dict:
            data = {
                "kind": self.kind,
                "title": self.title,
                "detail": self.detail,
            }

            if self.context:
                data["context"] = self.context

            # one level deep is enough for callers to inspect
            if isinstance(self.__cause__, SqlTemplateError):
                data["cause"] = self.__cause__.to_dict()

            return data

        _cls.__init__ = __init__
        _cls.__str__ = __str__
        _cls.__repr__ = __repr__
        _cls.to_dict = to_dict
        return _cls


class SqlTemplateError(Exception, metaclass=SqlTemplateErrorMeta):
    """The base class for every error in this package, extend it to build new ones.

    class TableNotFound(SqlTemplateError):
        title = "The table was not found"
        kind = "table-not-found"

    raise TableNotFound("Could not find a table named users", {"table": "users"})
    """


class NullOrEmptyTemplate(SqlTemplateError):
    title = "The SQL template is missing or blank."
    kind = "null-or-empty-template"


class NullTemplate(NullOrEmptyTemplate):
    title = "No SQL template was supplied."
    kind = "null-template"


class InvalidTemplate(NullOrEmptyTemplate):
    title = "The SQL template is empty or whitespace."
    kind = "invalid-template"


class InvalidParameterName(SqlTemplateError):
    title = "The parameter name is empty or whitespace."
    kind = "invalid-parameter-name"


class NullParameterValue(SqlTemplateError):
    title = "The parameter value is missing."
    kind = "null-parameter-value"


class InvalidParameter(SqlTemplateError):
    title = "Expected a Parameter."
    kind = "invalid-parameter"


class ParameterCountMismatch(SqlTemplateError):
    title = "The number of parameters doesn't match the placeholders in the template."
    kind = "parameter-count-mismatch"

    @property
    def expected(self) -> int:
        return self.context["expected"]

    @property
    def found(self) -> int:
        return self.context["found"]


class PlaceholderNotFound(SqlTemplateError):
    title = "A parameter has no placeholder in the template."
    kind = "placeholder-not-found"

    @property
    def token(self) -> str:
        return self.context["token"]


class DuplicateParameterName(SqlTemplateError):
    title = "More than one parameter shares a name."
    kind = "duplicate-parameter-name"

    @property
    def name(self) -> str:
        return self.context["name"]


class QueryBuildFailed(SqlTemplateError):
    """Wraps any error raised while building a query, the original is available as `cause`."""

    title = "The SQL query could not be built."
    kind = "query-build-failed"

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__
