from . import error
from . import literal
from . import option
from . import parameter
from . import query
from . import template
from . import util
from .error import QueryBuildFailed
from .error import SqlTemplateError
from .literal import format_parameter
from .literal import format_value
from .option import Option
from .parameter import Parameter
from .template import Config
from .template import SqlTemplate


__all__ = [
    "Config",
    "Option",
    "Parameter",
    "QueryBuildFailed",
    "SqlTemplate",
    "SqlTemplateError",
    "error",
    "format_parameter",
    "format_value",
    "literal",
    "option",
    "parameter",
    "query",
    "template",
    "util",
]
