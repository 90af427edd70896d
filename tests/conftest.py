import pytest

from skipscan.logging_config import configure_logging


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    # keep searcher debug events out of captured CLI output
    configure_logging(debug=False, force=True)
