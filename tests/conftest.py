"""Shared test fixtures for the ActiveCampaign client tests."""

import os
from unittest.mock import MagicMock

import pytest

from activecampaign.client import ActiveCampaignClient
from activecampaign.context import CREDENTIALS_NAME

CREDENTIALS = {"api_key": "test-key", "api_url": "https://acct.api-us1.com"}


@pytest.fixture()
def context():
    """A fake execution context holding valid credentials."""
    ctx = MagicMock()
    ctx.get_credentials.side_effect = lambda name: CREDENTIALS if name == CREDENTIALS_NAME else None
    return ctx


@pytest.fixture()
def client(context):
    return ActiveCampaignClient(context)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep a developer's .env / shell accounts out of the tests."""
    for key in list(os.environ):
        if key.startswith("ACTIVECAMPAIGN_"):
            monkeypatch.delenv(key)
