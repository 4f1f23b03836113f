"""Flat-file store for the article list."""
import asyncio
import logging
from pathlib import Path
from typing import Any, List, Union

import yaml
from pydantic import ValidationError

from api.models.article import Article
from shared.exceptions import NotFoundError, ParseError, SerializeError, StorageIOError

logger = logging.getLogger(__name__)

ARTICLES_FILE = "articles.yml"

TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class ArticleLoader(yaml.SafeLoader):
    """SafeLoader that keeps unquoted dates as their literal text."""


ArticleLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class ArticleStore:
    """Append-only store backed by a single YAML list file.

    Reads always load the whole file. Writes append one serialized record
    to the end of it; records are never updated or removed. Neither
    `article_id` uniqueness nor the date format is checked here.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = asyncio.Lock()

    @classmethod
    def for_content_root(cls, content_root: Union[str, Path]) -> "ArticleStore":
        """Create a store for the article list inside a content root."""
        return cls(Path(content_root) / ARTICLES_FILE)

    async def load_all(self) -> List[Article]:
        """Load every stored article, all or nothing."""
        async with self._lock:
            contents = await asyncio.to_thread(self._read)
        return self._parse(contents)

    async def append(self, article: Article) -> None:
        """Serialize one article and append it to the backing file."""
        data = self._serialize(article)
        async with self._lock:
            await asyncio.to_thread(self._write, data)
        logger.info(f"Appended article {article.article_id} to {self.path}")

    def _read(self) -> str:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError as e:
            raise NotFoundError(f"Article list not found: {self.path}") from e
        except UnicodeDecodeError as e:
            raise ParseError(f"Article list is not valid UTF-8: {self.path}") from e
        except OSError as e:
            raise StorageIOError(f"Error reading article list {self.path}: {e}") from e

    def _parse(self, contents: str) -> List[Article]:
        try:
            data: Any = yaml.load(contents, Loader=ArticleLoader)
        except (yaml.YAMLError, ValueError) as e:
            raise ParseError(f"Malformed article list {self.path}: {e}") from e

        if data is None:
            return []
        if not isinstance(data, list):
            raise ParseError(f"Article list {self.path} is not a sequence")

        try:
            return [Article.model_validate(entry) for entry in data]
        except ValidationError as e:
            raise ParseError(f"Invalid article entry in {self.path}: {e}") from e

    @staticmethod
    def _serialize(article: Article) -> bytes:
        # One-element sequence so the appended text continues the YAML list
        try:
            text = yaml.safe_dump(
                [article.model_dump()],
                sort_keys=False,
                allow_unicode=True,
                default_flow_style=False,
            )
        except yaml.YAMLError as e:
            raise SerializeError(f"Cannot serialize article {article.article_id}: {e}") from e
        return text.encode("utf-8")

    def _write(self, data: bytes) -> None:
        if not self.path.is_file():
            raise StorageIOError(f"Article list does not exist: {self.path}")
        try:
            with open(self.path, "a+b") as f:
                f.seek(0, 2)
                if f.tell() > 0:
                    f.seek(-1, 2)
                    if f.read(1) != b"\n":
                        f.write(b"\n")
                f.write(data)
        except OSError as e:
            raise StorageIOError(f"Error appending to article list {self.path}: {e}") from e
