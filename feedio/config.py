"""Shared configuration for the feedio package."""

import re

# HTTP timeout in seconds, used when the caller does not pass one
HTTP_TIMEOUT = 10

USER_AGENT = "feedio/0.1.0 (+https://pypi.org/project/feedio)"

RSS_VERSION = "2.0"

ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"

# Prefixes used for extension elements living outside a dialect's namespace
EXTENSION_NAMESPACES = {
    "atom": ATOM_NAMESPACE,
    "content": "http://purl.org/rss/1.0/modules/content/",
    "dc": "http://purl.org/dc/elements/1.1/",
    "media": "http://search.yahoo.com/mrss/",
}

URL_PATTERN = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)


def validate_url(url: str) -> None:
    """Validate a feed URL.

    Args:
        url: The URL to validate

    Raises:
        ValueError: If the URL is not an http(s) URL
    """
    if not URL_PATTERN.match(url):
        raise ValueError(
            f"Invalid feed URL: '{url}'. Expected an http(s) URL (e.g., https://example.com/feed.xml)"
        )


def validate_standard_name(name: str) -> None:
    """Validate a standard name before registration.

    Args:
        name: The standard name (e.g., "rss")

    Raises:
        ValueError: If the name is empty
    """
    if not name:
        raise ValueError(f"Invalid standard name: '{name}'. The name must not be empty")
