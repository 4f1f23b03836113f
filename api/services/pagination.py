"""Ordering and pagination of the article list."""
from typing import List, Sequence

from api.models.article import Article

PAGE_SIZE = 10


def order(articles: Sequence[Article]) -> List[Article]:
    """Return a new list sorted by date string, newest first.

    Dates are compared as plain strings, so they only sort chronologically
    when written as yyyy-mm-dd.
    """
    return sorted(articles, key=lambda a: a.date, reverse=True)


def paginate(ordered: Sequence[Article], page_index: int, page_size: int = PAGE_SIZE) -> List[Article]:
    """Return block `page_index` of `ordered`; empty when out of range."""
    start = page_index * page_size
    return list(ordered[start:start + page_size])


def page_count(total: int, page_size: int = PAGE_SIZE) -> int:
    """Floor of total / page_size.

    This is also the index the "Last" link points to. A trailing partial
    page therefore sits at index page_count, and when total is an exact
    multiple of page_size that index holds an empty page.
    """
    return total // page_size


def build_nav_links(page_index: int, num_pages: int) -> str:
    """Build the First/Previous/Next/Last bar for the article list."""
    links = ["<ul class = 'article_bar'>"]
    if page_index != 0:
        links.append("<li><a href=articles?index=0>First</a></li>")
        links.append(f"<li><a href=articles?index={page_index - 1}>Previous</a></li>")
    if page_index < num_pages:
        links.append(f"<li><a href=articles?index={page_index + 1}>Next</a></li>")
        links.append(f"<li><a href=articles?index={num_pages}>Last</a></li>")
    links.append("</ul>")
    return "".join(links)
