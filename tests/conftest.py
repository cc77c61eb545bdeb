"""Shared fixtures and Hypothesis strategies for tests."""

from __future__ import annotations

import pytest
from hypothesis import strategies as st

from fluent_requirements.factory import Validators
from fluent_requirements.global_configuration import GlobalConfiguration
from fluent_requirements.terminal import TerminalEncoding

# -----------------------------------------------------------------------------
# Hypothesis Strategies
# -----------------------------------------------------------------------------

# Strategy for valid value names (letters and numbers only)
names = st.text(
    min_size=1,
    max_size=20,
    alphabet=st.characters(whitelist_categories=("L", "N")),
)

# Strategy for names that must be rejected
invalid_names = st.one_of(
    st.just(""),
    st.text(alphabet=" \t\n", min_size=1, max_size=5),
    st.builds(lambda left, right: f"{left} {right}", names, names),
)

# Strategy for small collections of hashable elements
small_ints = st.integers(min_value=-20, max_value=20)
int_lists = st.lists(small_ints, max_size=8)

# Strategy for text without line breaks
single_line_text = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="\r\n\x1b"),
    max_size=30,
)

# Strategy for text that may span multiple lines
multi_line_text = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="\r\x1b"),
    max_size=30,
)


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


def new_scope(
    encoding: TerminalEncoding = TerminalEncoding.NO_COLORS,
    width: int = 80,
) -> GlobalConfiguration:
    """Create a global configuration that does not depend on the real terminal."""
    scope = GlobalConfiguration()
    scope.terminal_encoding = encoding
    scope.terminal_width = width
    return scope


def new_validators(
    encoding: TerminalEncoding = TerminalEncoding.NO_COLORS,
    width: int = 80,
    assertions_enabled: bool = False,
) -> Validators:
    """Create a factory with a deterministic terminal."""
    scope = new_scope(encoding, width)
    scope.assertions_enabled = assertions_enabled
    return Validators(scope)


# -----------------------------------------------------------------------------
# Pytest Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def scope() -> GlobalConfiguration:
    """Create a fresh global configuration without colours."""
    return new_scope()


@pytest.fixture
def validators(scope: GlobalConfiguration) -> Validators:
    """Create a factory bound to the ``scope`` fixture."""
    return Validators(scope)
