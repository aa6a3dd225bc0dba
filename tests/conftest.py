"""Pytest configuration and shared fixtures for the md2pub test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import pytest

from md2pub.ast import Document, Image, Link, Paragraph, Table, TableCell, TableRow, Text

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


def make_table(*rows):
    """Build a table from rows of cell strings."""
    return Table(
        children=[TableRow(children=[TableCell(children=[Text(value=cell)]) for cell in row]) for row in rows]
    )


@pytest.fixture
def blog_document():
    """A small post exercising every rewrite pass."""
    return Document(
        children=[
            Paragraph(children=[Text(value="参见[[#intro|简介]]与[[Other Post]]。")]),
            Paragraph(
                children=[
                    Text(value="正文^["),
                    Link(url="https://example.com", children=[Text(value="来源")]),
                    Text(value="]继续[^补充说明]"),
                ]
            ),
            Paragraph(children=[Image(url="../notes/attachments/cat.png", alt="猫")]),
            make_table(["Results", "Value"], ["a", "1"]),
            Paragraph(children=[Text(value="如[^图一]与[^表一]所示")]),
        ]
    )


@pytest.fixture
def table_builder():
    """Provide a factory building tables from rows of cell strings."""
    return make_table


@pytest.fixture
def restore_package_logger():
    """Restore the md2pub package logger after a test configures logging."""
    import logging

    package_logger = logging.getLogger("md2pub")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield package_logger
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
