import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    """CLI tests configure structlog globally; start every test from defaults."""
    yield
    structlog.reset_defaults()
