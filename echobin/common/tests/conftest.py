import pytest

from echobin.common.core.request_context import clear_request_id


@pytest.fixture(autouse=True)
def _clean_request_context():
    clear_request_id()
    yield
    clear_request_id()
