import pytest
from click.testing import CliRunner

from shadcn_ui.registry.registry import Registry
from tests.test_utils.builders import sample_registry


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def registry() -> Registry:
    return sample_registry()
