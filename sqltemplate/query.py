"""
Build templates with pypika instead of writing SQL by hand.

A `Placeholder` renders as a `{name}` token, so a pypika query turns into an
SqlTemplate that takes parameters like any hand written template.
"""
import pypika

from .template import Config
from .template import SqlTemplate


class Placeholder(pypika.Parameter):
    """
    Use to generate named placeholders in a pypika query.

    Pass the resultant query to `template_from_query`, then add a parameter
    for every placeholder.
    """

    def get_sql(self, **kwargs):
        if not isinstance(self.placeholder, str):
            raise TypeError(type(self.placeholder))
        return "{{{placeholder}}}".format(placeholder=self.placeholder)


def template_from_query(query, config: Config | None = None) -> SqlTemplate:
    """
    Given a pypika query with placeholders generated using the above class,
    build an SqlTemplate ready for parameters.
    """
    return SqlTemplate(str(query), config=config)
