"""Pytest configuration and shared fixtures for all tests."""

import os
import sys
from pathlib import Path

# Minimal environment required by Settings
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test_anon_key_for_testing_only")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

# Add project root to PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from datetime import timedelta
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from wallet.config.settings import Settings
from wallet.models.security import SecurityState
from wallet.utils.datetime_utils import utc_now


@pytest.fixture
def test_settings():
    """Settings instance isolated from the process environment."""
    return Settings(
        supabase_url="https://test-project.supabase.co",
        supabase_anon_key="test_anon_key_for_testing_only",
        environment="test",
    )


@pytest.fixture
def mock_wallet_client():
    """Mock WalletFunctionsClient with a verified PIN and accepted withdrawal."""
    client = AsyncMock()
    client.verify_pin = AsyncMock(return_value=True)
    client.setup_pin = AsyncMock(return_value=True)
    client.initiate_withdrawal = AsyncMock(
        return_value={
            "success": True,
            "data": {"reference": "WD-1700000000000-abcd1234", "status": "processing"},
        }
    )
    client.get_security_state = AsyncMock(
        return_value=SecurityState(has_pin=True, is_locked=False)
    )
    return client


@pytest.fixture
def unlocked_state():
    """Security state with PIN set and no lock."""
    return SecurityState(has_pin=True, is_locked=False)


@pytest.fixture
def locked_state():
    """Security state with a lock expiring in 12 hours."""
    return SecurityState(
        has_pin=True,
        is_locked=True,
        lock_expires_at=utc_now() + timedelta(hours=12),
    )


@pytest.fixture
def sample_balance():
    """Available balance used across withdrawal tests."""
    return Decimal("100000")


@pytest.fixture
def sample_payout_method_id():
    """Sample payout method reference."""
    return "8f14e45f-ceea-467f-a8b4-5d1c2e0a9b3c"
