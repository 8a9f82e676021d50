import logging
import os

import pytest


@pytest.fixture
def environ(monkeypatch):
    """A private copy of os.environ, discarded after the test."""
    copy = dict(os.environ)
    for name in ("APP_ENV", "LOG_LEVEL", "APPENV_DIR"):
        copy.pop(name, None)
    monkeypatch.setattr(os, "environ", copy)
    return copy


@pytest.fixture(autouse=True)
def reset_appenv_logger():
    yield
    logger = logging.getLogger("appenv")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
