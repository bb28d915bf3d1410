import pytest

from qor import headless


@pytest.fixture(autouse=True)
def reset():
    headless.set_server(False)
    yield
    headless.set_server(False)


def test_default_disabled():
    assert headless.enabled() is False


def test_enable():
    headless.enable()
    assert headless.enabled() is True


def test_set_server_toggles_headless():
    headless.set_server(True)
    assert headless.enabled() is True
    headless.set_server(False)
    assert headless.enabled() is False


def test_server_flag_untouched_by_set_server():
    headless.set_server(True)
    assert headless.server() is False