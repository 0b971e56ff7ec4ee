import pytest

from dynstr import reset_alloc_failure_hook


@pytest.fixture(autouse=True)
def restore_alloc_failure_hook():
    yield
    reset_alloc_failure_hook()
