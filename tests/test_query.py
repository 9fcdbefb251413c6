import datetime

import pypika
import pytest

import sqltemplate


Query = pypika.PostgreSQLQuery
User = pypika.Table("user")
Post = pypika.Table("post")
Placeholder = sqltemplate.query.Placeholder


def test_placeholder_renders_braces():
    query = Query.from_(User).select(User.star).where(User.email == Placeholder("email"))

    assert str(query) == """SELECT * FROM "user" WHERE "email"={email}"""


def test_placeholder_requires_a_name():
    query = Query.from_(User).select(User.star).where(User.id == Placeholder(1))

    with pytest.raises(TypeError):
        str(query)


def test_select():
    query = Query.from_(User).select(User.star).where(User.email == Placeholder("email"))

    template = sqltemplate.query.template_from_query(query)
    sql = template.add_parameter("email", "david@narigama.dev").build_query()

    assert sql == """SELECT * FROM "user" WHERE "email"='david@narigama.dev'"""


def test_insert():
    query = (
        Query.into(User)
        .columns(User.email, User.active, User.created_at)
        .insert(Placeholder("email"), Placeholder("active"), Placeholder("created_at"))
    )

    template = sqltemplate.query.template_from_query(query)
    template.add_parameter("email", "o'brien@example.com")
    template.add_parameter("active", True)
    template.add_parameter("created_at", datetime.datetime(2024, 1, 2, 3, 4, 5))

    assert template.build_query() == (
        """INSERT INTO "user" ("email","active","created_at") """
        """VALUES ('o''brien@example.com',1,'2024-01-02 03:04:05')"""
    )


def test_join():
    query = (
        Query.select(Post.star)
        .from_(Post)
        .join(User)
        .on(Post.user_id == User.id)
        .where(User.email == Placeholder("email"))
    )

    sql = sqltemplate.query.template_from_query(query).add_parameter("email", None).build_query()

    assert sql == """SELECT "post".* FROM "post" JOIN "user" ON "post"."user_id"="user"."id" WHERE "user"."email"=NULL"""


def test_template_from_query_uses_config():
    query = Query.from_(User).select(User.star).where(User.email == Placeholder("email"))
    config = sqltemplate.Config(strict_values=True)

    template = sqltemplate.query.template_from_query(query, config)

    assert template.config is config
    with pytest.raises(sqltemplate.error.NullParameterValue):
        template.add_parameter("email", None)
