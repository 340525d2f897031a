"""Prepare py.test."""

import shutil

import pytest
from click.testing import CliRunner

from domdump import reset_colors
from tests import TEST_FILES


@pytest.fixture(autouse=True)
def identity_colors():
    reset_colors()
    yield
    reset_colors()


@pytest.fixture
def runner():
    runner = CliRunner()
    with runner.isolated_filesystem() as temp_dir:
        shutil.copytree(TEST_FILES, f"{temp_dir}/tests/test_files")
        yield runner
