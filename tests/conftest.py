"""Shared test fixtures."""

import pytest

from tests.helpers import CountingReader, ScriptedReader


@pytest.fixture
def scripted_reader():
    return ScriptedReader


@pytest.fixture
def counting_reader():
    return CountingReader()
