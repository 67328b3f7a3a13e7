from __future__ import annotations

from typing import Iterator

import pytest

from readmegen.logging import get_logger
from readmegen.models import AnswerSet
from tests._fixtures.answers import FULL_OPTIONAL_FIELDS, make_answers


@pytest.fixture(autouse=True)
def _reset_readmegen_logging() -> Iterator[None]:
    """Drop handlers installed by cli.main so they never outlive a captured stream."""
    yield
    logger = get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def minimal_answers() -> AnswerSet:
    """Answers with only the required fields filled in."""
    return make_answers()


@pytest.fixture
def full_answers() -> AnswerSet:
    """Answers with every optional field filled in."""
    return make_answers(**FULL_OPTIONAL_FIELDS)
