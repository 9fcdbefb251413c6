import invoke


@invoke.task()
def lint(ctx: invoke.Context):
    ctx.run("ruff check sqltemplate tests")


@invoke.task()
def test_run(ctx: invoke.Context):
    ctx.run("pytest --cov=sqltemplate --cov-report=xml:coverage.xml")
