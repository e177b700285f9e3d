"""
Tests for Frontier admission and VisitedSet
"""

from sitecrawler.crawl.crawler import create_job
from sitecrawler.crawl.frontier import Frontier, VisitedSet


SEED = "https://example.com/"


def make_frontier(**kwargs):
    frontier = Frontier(create_job(SEED, **kwargs))
    frontier.seed()
    return frontier


class TestVisitedSet:

    def test_insert_once(self):
        visited = VisitedSet()
        assert visited.add(SEED) is True
        assert visited.add(SEED) is False
        assert SEED in visited
        assert len(visited) == 1


class TestFrontier:
    """Test queue order and the admission policy"""

    def test_seed_at_depth_zero(self):
        frontier = make_frontier()
        entry = frontier.pop()

        assert entry.url == SEED
        assert entry.depth == 0
        assert frontier.pop() is None

    def test_fifo_order(self):
        frontier = make_frontier(max_depth=3)
        frontier.pop()
        for path in ("a", "b", "c"):
            assert frontier.admit(SEED + path, 0, produced=1)

        assert [frontier.pop().url for _ in range(3)] == [SEED + "a", SEED + "b", SEED + "c"]

    def test_entry_depth_is_parent_plus_one(self):
        frontier = make_frontier(max_depth=3)
        frontier.pop()
        frontier.admit(SEED + "child", 1, produced=1)

        assert frontier.pop().depth == 2

    def test_rejects_at_max_depth(self):
        frontier = make_frontier(max_depth=1)
        frontier.pop()

        assert frontier.admit(SEED + "a", 0, produced=1) is True
        assert frontier.admit(SEED + "b", 1, produced=1) is False

    def test_rejects_when_quota_reached(self):
        frontier = make_frontier(max_pages=2)
        frontier.pop()

        assert frontier.admit(SEED + "a", 0, produced=1) is True
        assert frontier.admit(SEED + "b", 0, produced=2) is False

    def test_same_origin_policy(self):
        frontier = make_frontier(same_origin_only=True)
        frontier.pop()

        assert frontier.admit("https://other.org/", 0, produced=1) is False
        assert frontier.admit("http://example.com/plain-http", 0, produced=1) is True

    def test_cross_origin_allowed_when_disabled(self):
        frontier = make_frontier(same_origin_only=False)
        frontier.pop()

        assert frontier.admit("https://other.org/", 0, produced=1) is True

    def test_rejects_visited_and_queued(self):
        frontier = make_frontier()
        entry = frontier.pop()
        frontier.mark_visited(entry.url)

        assert frontier.admit(SEED, 0, produced=1) is False
        assert frontier.admit(SEED + "a", 0, produced=1) is True
        assert frontier.admit(SEED + "a", 0, produced=1) is False
        assert len(frontier) == 1

    def test_queued_membership_is_live(self):
        frontier = make_frontier()
        frontier.pop()
        frontier.admit(SEED + "a", 0, produced=1)

        assert frontier.is_queued(SEED + "a")
        frontier.pop()
        assert not frontier.is_queued(SEED + "a")
