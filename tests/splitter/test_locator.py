"""Unit tests for section location."""

from proposal_splitter.core.models import OPEN_END, Bookmark, PageRange
from proposal_splitter.splitter.config import (
    DATA_MANAGEMENT_PLAN_RE,
    DESCRIPTION_RE,
    MENTORING_PLAN_RE,
    REFERENCES_RE,
    SUMMARY_RE,
)
from proposal_splitter.splitter.locator import has_section, resolve_range


class TestResolveRange:
    """Tests for resolve_range."""

    def test_first_bookmark_runs_to_next_start(self, simple_bookmarks):
        assert resolve_range(SUMMARY_RE, simple_bookmarks, PageRange(1, 1)) == PageRange(1, 1)

    def test_middle_bookmark(self, simple_bookmarks):
        result = resolve_range(DESCRIPTION_RE, simple_bookmarks, PageRange(2, 16))
        assert result == PageRange(2, 10)

    def test_last_bookmark_is_open_ended(self, simple_bookmarks):
        result = resolve_range(REFERENCES_RE, simple_bookmarks, PageRange(17, OPEN_END))
        assert result == PageRange(11, OPEN_END)

    def test_missing_title_returns_default(self):
        bookmarks = [Bookmark("Introduction", 1, 3), Bookmark("Budget", 4, 5)]
        default = PageRange(1, 1)
        assert resolve_range(SUMMARY_RE, bookmarks, default) is default

    def test_empty_outline_returns_default(self):
        assert resolve_range(DESCRIPTION_RE, [], PageRange(2, 16)) == PageRange(2, 16)

    def test_match_is_case_insensitive(self):
        bookmarks = [Bookmark("PROJECT   SUMMARY", 1, 1), Bookmark("x", 2, 2)]
        assert resolve_range(SUMMARY_RE, bookmarks, PageRange.empty()) == PageRange(1, 1)

    def test_first_match_wins(self):
        bookmarks = [
            Bookmark("References", 5, 6),
            Bookmark("Appendix", 7, 8),
            Bookmark("References Cited", 9, 10),
        ]
        assert resolve_range(REFERENCES_RE, bookmarks, PageRange.empty()) == PageRange(5, 6)

    def test_children_are_not_scanned(self):
        nested = Bookmark("Front matter", 1, 2, children=[Bookmark("Summary", 1, 1)])
        bookmarks = [nested, Bookmark("Body", 3, 10)]
        default = PageRange(1, 1)
        assert resolve_range(SUMMARY_RE, bookmarks, default) is default

    def test_out_of_order_pages_not_validated(self):
        bookmarks = [Bookmark("Project Description", 10, 12), Bookmark("Summary", 2, 2)]
        assert resolve_range(DESCRIPTION_RE, bookmarks, PageRange.empty()) == PageRange(10, 1)


class TestHasSection:
    """Tests for has_section."""

    def test_absent_mentoring_plan(self, simple_bookmarks):
        assert has_section(MENTORING_PLAN_RE, simple_bookmarks) is False

    def test_present_plans(self):
        bookmarks = [Bookmark("Data Management Plans", 1, 1), Bookmark("Mentoring plan", 2, 2)]
        assert has_section(DATA_MANAGEMENT_PLAN_RE, bookmarks)
        assert has_section(MENTORING_PLAN_RE, bookmarks)

    def test_ignores_nested_titles(self):
        bookmarks = [Bookmark("Appendix", 1, 4, children=[Bookmark("Mentoring Plan", 2, 2)])]
        assert not has_section(MENTORING_PLAN_RE, bookmarks)
