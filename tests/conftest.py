"""Root-level pytest fixtures for the contractkit test suite.

Provides configuration and checker fixtures. Tests that touch the
process-wide bypass switch must go through ``default_checker`` so the
switch is restored afterwards.
"""

import pytest

from contractkit import ContractChecker, set_default_checker
from contractkit.schemas import ParamConfig, UserConfig, resolve_config


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Expert configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None)


@pytest.fixture
def make_checker(param_config):
    """Factory fixture for checkers with custom config.

    Examples
    --------
    >>> def test_prefix(make_checker):
    ...     checker = make_checker(invariant_name_prefix="Field-")
    """
    def _make(**user_overrides):
        if user_overrides:
            return ContractChecker(resolve_config(param_config, UserConfig(**user_overrides)))
        return ContractChecker(resolve_config(param_config, None))

    return _make


# =============================================================================
# Process-wide state
# =============================================================================

@pytest.fixture
def default_checker(internal_config):
    """Fresh process-wide checker, replaced by the previous one after the test."""
    checker = ContractChecker(internal_config)
    previous = set_default_checker(checker)
    yield checker
    set_default_checker(previous)
