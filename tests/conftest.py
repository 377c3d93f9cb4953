"""Pytest fixtures for lazyconcat tests."""

import pytest

import lazyconcat


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests (plain Python sources)")
    config.addinivalue_line("markers", "integration: integration tests with columnar sources")
    config.addinivalue_line("markers", "polars: requires polars package")
    config.addinivalue_line("markers", "pandas: requires pandas package")


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def restore_resolution_mode():
    """Undo lazyconcat.use() calls made by a test."""
    original = lazyconcat.get_mode()
    yield
    lazyconcat.use(original)


class Foo:
    pass


class Bar(Foo):
    pass


class Qux(Foo):
    pass


class Unrelated:
    pass


@pytest.fixture
def hierarchy():
    """Foo base with two sibling subclasses, plus an unrelated class."""
    return Foo, Bar, Qux, Unrelated
