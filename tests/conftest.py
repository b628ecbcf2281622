"""Shared pytest fixtures: dialects, catalog, reports and a checker runner."""
import pytest

from schema_walker.keyword import draftv3, draftv4
from schema_walker.messages import default_catalog
from schema_walker.report import LogLevel, ProcessingReport
from schema_walker.tree import SchemaTree


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def v4():
    return draftv4()


@pytest.fixture
def v3():
    return draftv3()


@pytest.fixture
def report():
    """A report retaining every level and never raising."""
    return ProcessingReport(log_level=LogLevel.DEBUG, exception_threshold=LogLevel.NONE)


@pytest.fixture
def run_checker(catalog):
    """Run one keyword checker of a dialect against a schema object.

    Returns (collector, report).
    """
    def _run(dialect, keyword, schema):
        report = ProcessingReport(log_level=LogLevel.DEBUG, exception_threshold=LogLevel.NONE)
        collector = []
        tree = SchemaTree(schema)
        dialect.checkers[keyword].check_syntax(collector, catalog, report, tree)
        return collector, report

    return _run
