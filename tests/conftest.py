"""Test configuration and fixtures for chemfigpy tests."""

import pytest


@pytest.fixture
def simple_fragments() -> list[str]:
    """Basic valid fragments for smoke testing."""
    return [
        "C",
        "CC",
        "Cl",
        "C-C",
        "C=C",
        "C≡N",
        "C-[4]C",
        "H-C-H",
    ]


@pytest.fixture
def branched_fragments() -> list[str]:
    """Fragments with parenthesized branches."""
    return [
        "C(-H)",
        "C(-H)(-H)",
        "C(=O)-O",
        "C(-C(-H)-H)",
        "()",
        "((C))",
    ]


@pytest.fixture
def ring_fragments() -> list[str]:
    """Fragments with ring closures."""
    return [
        "*(C-C-C-)",
        "*(C=C-C=C-C=C-)",
        "C*(C-O=)",
        "*(-)",
        "*(C(-H)-[2])",
        "*(*(C-)-)",
    ]


@pytest.fixture
def repeated_fragments() -> list[str]:
    """Fragments using repetition shorthand."""
    return [
        "C_1",
        "C_3",
        "C-_2C",
        "C(-H)_3",
        "*(C-C=)_2",
        "Cl_12",
    ]


@pytest.fixture
def valid_fragments(
    simple_fragments, branched_fragments, ring_fragments, repeated_fragments
) -> list[str]:
    """Every valid fragment from the other fixtures."""
    return simple_fragments + branched_fragments + ring_fragments + repeated_fragments
