import random
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from app import app
from services.stream_controller import ReadingStreamController


class FakeClock:
    """Returns a time one second later on every call"""

    def __init__(self, start=datetime(2024, 5, 1, 12, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(seconds=1)
        return current


@pytest.fixture
def controller():
    return ReadingStreamController(rng=random.Random(1234), clock=FakeClock())


@pytest.fixture
def client(controller):
    """Test client whose routes use the `controller` fixture"""
    with TestClient(app) as client:
        app.state.controller = controller
        yield client
