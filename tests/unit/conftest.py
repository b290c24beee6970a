"""
Shared fixtures for unit tests.

This module provides common fixtures used across multiple test modules:
- SecurityGate instance
- PinChallenge instance with a recording callback
- DeepLinkResolver instance
"""

import pytest

from deeplink import DeepLinkResolver
from wallet.services.pin_challenge import PinChallenge
from wallet.services.withdrawal import SecurityGate


@pytest.fixture
def gate():
    """
    Create SecurityGate instance.

    Returns:
        SecurityGate: Gate for testing
    """
    return SecurityGate()


@pytest.fixture
def completed_pins():
    """List collecting PINs emitted by the challenge."""
    return []


@pytest.fixture
def challenge(completed_pins):
    """
    Create PinChallenge that records completed PINs.

    Args:
        completed_pins: List receiving emitted PINs

    Returns:
        PinChallenge: Challenge for testing
    """
    return PinChallenge(on_complete=completed_pins.append)


@pytest.fixture
def resolver():
    """
    Create DeepLinkResolver with the default route table.

    Returns:
        DeepLinkResolver: Resolver for testing
    """
    return DeepLinkResolver()
