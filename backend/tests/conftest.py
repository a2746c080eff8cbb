import pytest
from fastapi.testclient import TestClient
from structlog.testing import capture_logs

from app.application.services import error_translation_service
from app.application.services.error_translation_service import ErrorTranslator
from app.config import Settings
from app.infrastructure.logging import get_logger
from app.main import app
from tests.helpers.app import build_error_app
from tests.helpers.errors import fixed_clock


@pytest.fixture
def translator():
    return ErrorTranslator(config=Settings(), clock=fixed_clock)


@pytest.fixture
def captured_logs(monkeypatch):
    # Module loggers may already be cached against the app's processors.
    monkeypatch.setattr(error_translation_service, "logger", get_logger(error_translation_service.__name__))
    with capture_logs() as logs:
        yield logs


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def error_client():
    with TestClient(build_error_app(), raise_server_exceptions=False) as test_client:
        yield test_client
