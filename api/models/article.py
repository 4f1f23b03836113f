"""Article model definitions."""
from html import escape as html_escape
from xml.sax.saxutils import escape as xml_escape

from pydantic import BaseModel, Field

from shared.utils import format_rss_date, join_url


class Article(BaseModel):
    """One entry of the article list."""
    title: str = Field(..., description="Display title")
    article_id: str = Field(..., description="Slug naming the body file articles/{article_id}.md")
    description: str = Field(..., description="Short summary used in previews and the feed")
    date: str = Field(..., description="Publication date in yyyy-mm-dd form")

    def to_preview_html(self) -> str:
        """Build the preview fragment shown on the homepage and article list."""
        return (
            "\n<div class='article_preview'>"
            f"\n    <h2>{html_escape(self.title)}</h2>"
            "\n    <div class='preview_content'>"
            f"\n    <p class='article_timestamp'>{html_escape(self.date)}</p>"
            f"\n    <p>{html_escape(self.description)}</p>"
            "\n    </div>"
            f"\n    <a href='/./articles/{html_escape(self.article_id)}'>Read</a>"
            "\n</div>\n"
        )

    def to_rss_item(self, site_link: str) -> str:
        """Build an RSS 2.0 <item> element for this article."""
        link = xml_escape(join_url(site_link, "articles", self.article_id))
        return (
            "\n<item>"
            f"\n    <title>{xml_escape(self.title)}</title>"
            f"\n    <pubDate>{xml_escape(format_rss_date(self.date))}</pubDate>"
            f"\n    <description>{xml_escape(self.description)}</description>"
            f"\n    <link>{link}</link>"
            f"\n    <guid>{link}</guid>"
            "\n</item>\n"
        )
