from tests.fakes.fake_search_index import FakeSearchIndex

__all__ = ["FakeSearchIndex"]
