"""Ordering and pagination tests."""
from api.services.pagination import PAGE_SIZE, build_nav_links, order, page_count, paginate


class TestOrder:
    """Tests for order."""

    def test_order_newest_first(self, make_article):
        """Test dates sort descending."""
        articles = [make_article(3), make_article(12), make_article(7)]

        ordered = order(articles)

        assert [a.date for a in ordered] == ["2024-01-12", "2024-01-07", "2024-01-03"]
        for current, following in zip(ordered, ordered[1:]):
            assert current.date >= following.date

    def test_order_returns_new_list(self, make_article):
        """Test the input sequence is left untouched."""
        articles = [make_article(1), make_article(2)]
        ordered = order(articles)

        assert ordered is not articles
        assert [a.article_id for a in articles] == ["article-1", "article-2"]

    def test_order_is_lexical(self, make_article):
        """Test dates compare as strings, not calendar values."""
        articles = [make_article(1, date="2024-9-01"), make_article(2, date="2024-10-01")]

        ordered = order(articles)

        # "2024-9-01" > "2024-10-01" as strings
        assert [a.article_id for a in ordered] == ["article-1", "article-2"]

    def test_order_empty(self):
        """Test ordering nothing."""
        assert order([]) == []


class TestPaginate:
    """Tests for paginate."""

    def test_first_page(self, make_article):
        """Test page 0 holds the first ten."""
        articles = [make_article(n) for n in range(1, 26)]

        page = paginate(articles, 0)

        assert page == articles[:10]

    def test_partial_last_page(self, make_article):
        """Test the trailing page holds the remainder."""
        articles = [make_article(n) for n in range(1, 26)]

        assert paginate(articles, 2) == articles[20:]
        assert len(paginate(articles, 2)) == 5

    def test_out_of_range_page_is_empty(self, make_article):
        """Test an index past the end is an empty page, not an error."""
        articles = [make_article(n) for n in range(1, 6)]

        assert paginate(articles, 1) == []
        assert paginate(articles, 65535) == []

    def test_page_size_bound(self, make_article):
        """Test no page is larger than the page size."""
        articles = [make_article(n) for n in range(1, 31)]
        for i in range(4):
            assert len(paginate(articles, i)) <= PAGE_SIZE


class TestPageCount:
    """Tests for page_count."""

    def test_floor_division(self):
        """Test a trailing partial page is not counted."""
        assert page_count(25) == 2
        assert page_count(20) == 2
        assert page_count(9) == 0
        assert page_count(0) == 0

    def test_custom_page_size(self):
        """Test a different page size."""
        assert page_count(25, page_size=5) == 5


class TestNavLinks:
    """Tests for build_nav_links."""

    def test_single_page_has_no_links(self):
        """Test fewer than ten articles gives an empty bar."""
        links = build_nav_links(0, page_count(7))

        assert links == "<ul class = 'article_bar'></ul>"

    def test_first_page_links_forward(self):
        """Test page 0 offers Next and Last only."""
        links = build_nav_links(0, 2)

        assert "First" not in links
        assert "Previous" not in links
        assert "<a href=articles?index=1>Next</a>" in links
        assert "<a href=articles?index=2>Last</a>" in links

    def test_middle_page_links_both_ways(self):
        """Test a middle page offers all four links."""
        links = build_nav_links(1, 2)

        assert "<a href=articles?index=0>First</a>" in links
        assert "<a href=articles?index=0>Previous</a>" in links
        assert "<a href=articles?index=2>Next</a>" in links
        assert "<a href=articles?index=2>Last</a>" in links

    def test_trailing_page_has_no_forward_links(self):
        """Test 25 articles: page 2 exists but offers no Next or Last."""
        links = build_nav_links(2, page_count(25))

        assert "Next" not in links
        assert "Last" not in links
        assert "<a href=articles?index=1>Previous</a>" in links

    def test_beyond_last_page(self):
        """Test an index past the count offers only backward links."""
        links = build_nav_links(7, 2)

        assert "Next" not in links
        assert "<a href=articles?index=6>Previous</a>" in links
