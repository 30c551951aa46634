"""Shared test configuration and fixtures."""

import pytest

from services.resume_parser import ResumeParser


# "Present" resolves to this year in every test that needs a fixed clock
CURRENT_YEAR = 2024


@pytest.fixture
def current_year():
    return CURRENT_YEAR


@pytest.fixture
def parser():
    return ResumeParser(current_year=CURRENT_YEAR)
