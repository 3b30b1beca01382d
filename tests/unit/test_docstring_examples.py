#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Run the interactive examples embedded in module docstrings."""

import doctest
import importlib

import pytest

MODULES_WITH_EXAMPLES = [
    "html_simple",
    "html_simple.element",
    "html_simple.escape",
    "html_simple.generator",
    "html_simple.policy",
    "html_simple.security",
]


@pytest.mark.unit
@pytest.mark.parametrize("module_name", MODULES_WITH_EXAMPLES)
def test_docstring_examples_run(module_name):
    """Test that every ``>>>`` example is self-contained and prints what it claims."""
    module = importlib.import_module(module_name)
    results = doctest.testmod(module, optionflags=doctest.ELLIPSIS)
    assert results.attempted > 0
    assert results.failed == 0
