"""Pytest configuration and fixtures."""
import pytest
from httpx import AsyncClient, ASGITransport

from api.main import create_app
from api.models.article import Article
from shared.config import SiteConfig
from storage.article_store import ArticleStore


ARTICLES_YML = """\
- title: First Post
  article_id: first-post
  description: Where it all began
  date: '2024-01-05'
- title: Second Post
  article_id: second-post
  description: Things & stuff
  date: '2024-02-10'
- title: Third Post
  article_id: third-post
  description: Still going
  date: '2024-03-15'
"""


@pytest.fixture
def content_root(tmp_path):
    """Create a content root with templates, articles and assets."""
    (tmp_path / "index.html").write_text("<html><main>{latest_article}</main></html>")
    (tmp_path / "articles.html").write_text("<html><main>{articles}</main><nav>{links}</nav></html>")
    (tmp_path / "article_template.html").write_text("<html><article>{article_content}</article></html>")
    (tmp_path / "articles.yml").write_text(ARTICLES_YML)

    articles_dir = tmp_path / "articles"
    articles_dir.mkdir()
    (articles_dir / "first-post.md").write_text("# First Post\n\nHello *world*.\n")
    (articles_dir / "second-post.md").write_text("# Second Post\n\nMore text.\n")

    assets_dir = tmp_path / "assets"
    assets_dir.mkdir()
    (assets_dir / "style.css").write_text("body { color: black; }\n")

    return tmp_path


@pytest.fixture
def site_config(content_root):
    """Create site configuration pointing at the temporary content root."""
    return SiteConfig(
        port="8080",
        file_path=str(content_root),
        site_title="Test Blog",
        site_description="A blog for tests",
        site_link="https://blog.example.com",
        admin_username="admin",
        admin_password="s3cret"
    )


@pytest.fixture
def store(content_root):
    """Create an article store over the temporary article list."""
    return ArticleStore.for_content_root(content_root)


@pytest.fixture
def app(site_config):
    """Create the application under test."""
    return create_app(site_config)


@pytest.fixture
async def client(app):
    """Create an HTTP client bound to the application."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def make_article():
    """Factory for sample articles."""
    def _make(n: int, date: str = None) -> Article:
        return Article(
            title=f"Article {n}",
            article_id=f"article-{n}",
            description=f"Summary {n}",
            date=date or f"2024-01-{n:02d}"
        )
    return _make


@pytest.fixture
def sample_submission():
    """Create a valid submission body."""
    return {
        "title": "Fresh Post",
        "article_id": "fresh-post",
        "description": "Just written",
        "date": "2024-04-01"
    }
