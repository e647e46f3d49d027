import pytest

from diagramatics.config import reset_config


@pytest.fixture(autouse=True)
def _restore_config():
    yield
    reset_config()
