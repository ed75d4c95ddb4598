"""Configuration for TableFit tests."""

import pytest

from .testing_utils import fake_context, make_font


@pytest.fixture
def context():
    return fake_context()


@pytest.fixture
def font_path(tmp_path):
    return make_font(tmp_path / 'test-font.ttf')
