"""Automation sessions for linting, type checking, and tests."""

from __future__ import annotations

import nox

PYTHON_VERSIONS = ["3.11", "3.12"]


def _install(session: nox.Session) -> None:
    session.install("uv")
    session.run("uv", "pip", "install", ".[dev]")


@nox.session(python=PYTHON_VERSIONS)
def lint(session: nox.Session) -> None:
    """Run Ruff lint checks."""
    _install(session)
    session.run("ruff", "check", "--fix", ".")


@nox.session(python=PYTHON_VERSIONS)
def typecheck(session: nox.Session) -> None:
    """Run static type checking."""
    _install(session)
    session.run("mypy", "src", "tests")
    session.run("pyright", "src", "tests")


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run the test suite with coverage of the saferm package."""
    _install(session)
    session.run(
        "pytest",
        "--cov=saferm",
        "--cov-report=term-missing",
        "--cov-report=xml",
        *session.posargs,
    )
