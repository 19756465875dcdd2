import logging

import pytest


@pytest.fixture
def items():
    return ["A", "B", "C", "DD"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("SAFEFUNC_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SAFEFUNC_LOG_FILE", raising=False)


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("safefunc")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
