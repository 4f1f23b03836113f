"""Page building over the content root."""
import asyncio
import logging
from pathlib import Path
from xml.sax.saxutils import escape as xml_escape

import markdown

from api.services.pagination import build_nav_links, order, page_count, paginate
from api.services.rendering import RSS_ENVELOPE, render
from shared.config import SiteConfig
from shared.exceptions import NotFoundError, ParseError, StorageIOError
from shared.utils import is_within
from storage.article_store import ArticleStore

logger = logging.getLogger(__name__)

HOMEPAGE_TEMPLATE = "index.html"
ARTICLE_LIST_TEMPLATE = "articles.html"
ARTICLE_TEMPLATE = "article_template.html"
NOT_FOUND_TEMPLATE = "fnfpage.html"
ARTICLES_DIR = "articles"

DEFAULT_NOT_FOUND_PAGE = "<h1>404 Page not found</h1><p>Ironic I know</p>"
FEED_SIZE = 10

MD_EXTENSIONS = [
    "fenced_code",
    "tables",
]


def _read_text(path: Path) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError as e:
        raise NotFoundError(f"File not found: {path}") from e
    except UnicodeDecodeError as e:
        raise ParseError(f"File is not valid UTF-8: {path}") from e
    except OSError as e:
        raise StorageIOError(f"Error reading {path}: {e}") from e


class ContentService:
    """Builds every page of the site from templates and the article store."""

    def __init__(self, config: SiteConfig, store: ArticleStore):
        self.config = config
        self.store = store
        self.root = config.content_root

    async def load_template(self, name: str) -> str:
        """Read a template file from the content root."""
        return await asyncio.to_thread(_read_text, self.root / name)

    async def convert_article_body(self, article_id: str) -> str:
        """Convert articles/{article_id}.md to HTML."""
        articles_dir = self.root / ARTICLES_DIR
        target = articles_dir / f"{article_id}.md"
        if not is_within(target, articles_dir):
            raise NotFoundError(f"Article id escapes the articles directory: {article_id!r}")

        source = await asyncio.to_thread(_read_text, target)
        try:
            return markdown.markdown(source, extensions=MD_EXTENSIONS, output_format="html")
        except Exception as e:
            raise ParseError(f"Cannot convert {target}: {e}") from e

    async def homepage(self) -> str:
        """Homepage template with the newest article's preview inserted."""
        template = await self.load_template(HOMEPAGE_TEMPLATE)
        articles = order(await self.store.load_all())
        latest = "".join(a.to_preview_html() for a in articles[:1])
        return render(template, {"latest_article": latest})

    async def article_page(self, article_id: str) -> str:
        """Article template with the converted body inserted."""
        template = await self.load_template(ARTICLE_TEMPLATE)
        content = await self.convert_article_body(article_id)
        return render(template, {"article_content": content})

    async def article_list_page(self, page_index: int) -> str:
        """One page of article previews plus navigation links."""
        articles = order(await self.store.load_all())
        num_pages = page_count(len(articles))
        previews = "".join(a.to_preview_html() for a in paginate(articles, page_index))

        template = await self.load_template(ARTICLE_LIST_TEMPLATE)
        return render(template, {
            "articles": previews,
            "links": build_nav_links(page_index, num_pages),
        })

    async def feed(self) -> str:
        """RSS 2.0 document with the ten newest articles."""
        articles = order(await self.store.load_all())
        items = "".join(a.to_rss_item(self.config.site_link) for a in articles[:FEED_SIZE])
        return render(RSS_ENVELOPE, {
            "title": xml_escape(self.config.site_title),
            "link": xml_escape(self.config.site_link),
            "description": xml_escape(self.config.site_description),
            "content": items,
        })

    async def not_found_page(self) -> str:
        """The custom not-found page, or the built-in one if it is unavailable."""
        try:
            return await self.load_template(NOT_FOUND_TEMPLATE)
        except (NotFoundError, ParseError, StorageIOError) as e:
            logger.debug(f"Using default not-found page: {e}")
            return DEFAULT_NOT_FOUND_PAGE
