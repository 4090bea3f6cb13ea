"""Pytest configuration and shared fixtures for the html2md test suite."""

import pytest

from html2md import Converter, ConverterOptions, commonmark_rules, create_converter

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

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
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def converter() -> Converter:
    """Converter with the CommonMark rules and the GFM plugin."""
    return create_converter()


@pytest.fixture
def commonmark_converter() -> Converter:
    """Converter with the CommonMark rules only."""
    return Converter().add_rules(*commonmark_rules)


@pytest.fixture
def convert(converter):
    """Shortcut converting an HTML string with the default converter."""
    return converter.convert_string


@pytest.fixture
def convert_with():
    """Convert an HTML string with a converter built from the given options."""

    def _convert(html: str, **option_values) -> str:
        return create_converter(ConverterOptions(**option_values)).convert_string(html)

    return _convert
