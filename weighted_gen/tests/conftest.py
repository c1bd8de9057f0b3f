from __future__ import annotations

import logging

import pytest

from weighted_gen.app.services.logger import LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_app_logger():
    yield
    app_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(app_logger.handlers):
        handler.close()
    app_logger.handlers.clear()
    app_logger.setLevel(logging.NOTSET)
    app_logger.propagate = True
