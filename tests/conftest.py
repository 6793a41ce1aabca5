"""Pytest configuration and fixtures."""

import os
from unittest.mock import patch

import pytest


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ["SUPABASE_URL"] = "https://test.supabase.co"
    os.environ["SUPABASE_SERVICE_ROLE_KEY"] = "test-key"
    os.environ["OPENAI_API_KEY"] = "test-openai-key"
    os.environ["GRADEIDEA_ENV"] = "test"


@pytest.fixture
def fake_supabase():
    """In-memory Supabase client patched into the db modules."""
    from tests.fakes.fake_supabase import FakeSupabase

    fake = FakeSupabase()
    with patch("gradeidea.db.checklists.get_supabase", return_value=fake), \
         patch("gradeidea.db.ideas.get_supabase", return_value=fake):
        yield fake
