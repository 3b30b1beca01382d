"""Pytest configuration and shared fixtures for the html_simple test suite."""

import os

import pytest

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, skip configuration
    pass

from html_simple import Generator, GeneratorOptions


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "security: Tests covering sanitization and XSS defenses")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def generator() -> Generator:
    """Provide a generator with default policies."""
    return Generator()


@pytest.fixture
def strict_generator() -> Generator:
    """Provide a generator that raises on builder misuse."""
    return Generator(options=GeneratorOptions(strict=True))
