import pytest

from whatsnew.common.utils import config as config_module


@pytest.fixture(autouse=True)
def restore_config():
    """Tests may swap the config; put the original back afterwards."""
    original = config_module.get_config()
    yield
    config_module.set_config(original)


@pytest.fixture
def changelog() -> str:
    return "### Features\n- a\n- **b** and c\n\n### Fixes\n- d"
