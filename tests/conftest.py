# tests/conftest.py
import logging

import pytest

from charmarkov.core.language_model import LanguageModel


@pytest.fixture(autouse=True)
def _reset_package_logger():
    # handlers bound to a captured stream must not leak into later tests
    yield
    log = logging.getLogger("charmarkov")
    for h in list(log.handlers):
        log.removeHandler(h)
    log.setLevel(logging.NOTSET)


@pytest.fixture
def trained():
    """Window-2 model trained on a short repetitive sentence."""
    lm = LanguageModel(2, seed=20)
    lm.train("the cat sat on the mat and the cat ran")
    return lm
