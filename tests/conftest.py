"""
Pytest configuration and fixtures.
"""

import logging

import pytest

from kafka_connect_exporter.client import KafkaConnectClient
from kafka_connect_exporter.logging import ROOT_LOGGER
from tests.fakes import BASE_URI, FakeSession


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() so caplog keeps working across tests."""
    yield
    package_logger = logging.getLogger(ROOT_LOGGER)
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> KafkaConnectClient:
    return KafkaConnectClient(BASE_URI, session=session)
