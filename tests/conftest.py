import pytest

from scalar_search import SearchStatus


@pytest.fixture
def status() -> SearchStatus:
    return SearchStatus()
