import io
import logging

import pytest
import structlog

from aplusb.config.settings import reset_config
from aplusb.services.operation_service import OperationService
from aplusb.services.summation_service import SummationService


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Clear APLUSB_* variables, cached configuration and logging setup around each test"""
    for var in ["APLUSB_LOG_LEVEL", "APLUSB_JSON_LOGS", "APLUSB_ALL_LINES"]:
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture
def operation_service():
    """Operation service with plugins loaded"""
    service = OperationService()
    service.load_operations()
    return service


@pytest.fixture
def summation_service(operation_service):
    """Summation service backed by the loaded operations"""
    return SummationService(operation_service)


@pytest.fixture
def stdout():
    """In-memory output stream"""
    return io.StringIO()
