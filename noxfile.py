import nox

PYTHON_VERSIONS = ["3.9", "3.10", "3.11", "3.12"]
PACKAGE = "casesearch"

nox.options.reuse_existing_virtualenvs = True
nox.options.sessions = ("pytest", "lint")


@nox.session(python="python3")
def lint(session):
    session.install("-e", ".[dev]")
    session.run("flake8", "--max-line-length=88", PACKAGE)


@nox.session(python=PYTHON_VERSIONS)
def pytest(session):
    session.install("-e", ".[tests]")
    session.run("pip", "check")
    session.run("pytest", "-q", PACKAGE)
