"""
Text helpers for search result normalization.
"""

from typing import Any
from urllib.parse import urlsplit


def extract_domain(link: str) -> str:
    """
    Return the host of a URL without a leading "www.".
    
    Args:
        link: Result URL
        
    Returns:
        Domain name, "" for an empty link, or the link itself when no host
        can be parsed from it.
        
    Examples:
        >>> extract_domain('https://www.nature.com/articles/s41586')
        'nature.com'
        >>> extract_domain('not a url')
        'not a url'
    """
    if not link:
        return ""
    try:
        host = urlsplit(link).hostname
    except ValueError:
        return link
    if not host:
        return link
    if host.startswith("www."):
        host = host[4:]
    return host


def as_text(value: Any) -> str:
    """Coerce a JSON field to a string; missing or null becomes ""."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
