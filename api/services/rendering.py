"""Literal placeholder substitution for HTML and XML templates."""
import re
from typing import Mapping

RSS_ENVELOPE = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
<channel>
<title>{title}</title>
<link>{link}</link>
<description>{description}</description>
{content}
</channel>
</rss>
"""


def token(name: str) -> str:
    """Return the placeholder text for `name`, e.g. `{articles}`."""
    return "{" + name + "}"


def render(template: str, values: Mapping[str, str]) -> str:
    """Replace every `{name}` token of `values` in a single pass.

    Substituted text is never rescanned, and tokens with no entry in
    `values` are left as they are.
    """
    if not values:
        return template
    pattern = re.compile("|".join(re.escape(token(name)) for name in values))
    return pattern.sub(lambda m: values[m.group(0)[1:-1]], template)
