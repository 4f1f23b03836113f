"""Error types shared by the store, the renderers and the API."""


class BlogError(Exception):
    """Base class for content and storage failures."""


class NotFoundError(BlogError):
    """A template, body file or the article list does not exist."""


class ParseError(BlogError):
    """Stored data or markup source is malformed."""


class StorageIOError(BlogError):
    """Filesystem failure other than a missing file."""


class SerializeError(BlogError):
    """A record could not be encoded for storage."""


class ConfigError(Exception):
    """The site configuration could not be loaded."""
