"""Shared fixtures for buttonforge tests."""

import os

os.environ.setdefault("BUTTONFORGE_API_BASE", "https://discord.com/api")
os.environ.setdefault("BUTTONFORGE_API_VERSION", "10")

import discord
import pytest


class RecordingExecutor:
    """Stands in for an HTTP client; keeps every request it is handed."""

    def __init__(self):
        self.requests = []

    def submit(self, request):
        self.requests.append(request)
        return "sent"


@pytest.fixture()
def executor():
    return RecordingExecutor()


@pytest.fixture()
def thumbs_up():
    return discord.PartialEmoji(name="👍")
