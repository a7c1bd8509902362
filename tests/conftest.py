import logging
from pathlib import Path

import pytest


def pytest_configure(config):
    """Register markers for pytest."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "cli: mark test as exercising the command line interface")


@pytest.fixture(autouse=True)
def reset_dekhao_logger():
    """Undo logger configuration done by CLI runs so caplog sees every record."""
    yield
    package_logger = logging.getLogger("dekhao")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture(autouse=True)
def clear_debug_env(monkeypatch):
    for name in ("DEKHAO_DEBUG", "DEKHAO_RERAISE", "DEKHAO_VERBOSE", "DEKHAO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


SAMPLE_SOURCE = '''dekhao("Hello", x)
integer count te 5 + 2

float ratio te total / count
string name te "Rahim"
something else here
dekhao "missing parens"
'''


@pytest.fixture
def sample_source() -> str:
    return SAMPLE_SOURCE


@pytest.fixture
def sample_file(tmp_path) -> Path:
    """Create a temporary source file for testing."""
    source_file = tmp_path / "hello.dk"
    source_file.write_text(SAMPLE_SOURCE, encoding="utf-8")
    return source_file
