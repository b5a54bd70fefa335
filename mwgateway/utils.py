#!/usr/bin/env python3
"""
Page title utilities for MediaWiki clients.

Converts between the two forms a page title travels in:
- Wiki form: "Getting there & away", used for display and in API params
- URL form: "Getting_there_%26_away", used inside request URLs

Also splits wiki-form titles into base page, parent path and subpage.

Usage:
    from mwgateway.utils import wiki_to_uri, uri_to_wiki

    wiki_to_uri("Help:Getting there & away")  # "Help:Getting_there_%26_away"
    uri_to_wiki("getting_there_%26_away")     # "Getting there & away"
"""

from typing import Any, Optional
from urllib.parse import quote, unquote

from mwgateway import __version__

# Characters MediaWiki refuses in page names (Help:Page_name#Restrictions)
ILLEGAL_TITLE_CHARS = "#<>[]|{}"

_STRIP_ILLEGAL = str.maketrans("", "", ILLEGAL_TITLE_CHARS)


def get_base_name(title: Optional[str]) -> Optional[str]:
    """
    Extract the base page name. If there are no subpages, return the title.

    Examples:
        get_base_name("Namespace:Foo/Bar/Baz") -> "Namespace:Foo"
        get_base_name("Namespace:Foo") -> "Namespace:Foo"
    """
    if title is None:
        return None
    return title.split("/")[0]


def get_path_to_subpage(title: Optional[str]) -> Optional[str]:
    """
    Extract the path leading up to the subpage, or None without a subpage.

    Examples:
        get_path_to_subpage("Namespace:Foo/Bar/Baz") -> "Namespace:Foo/Bar"
        get_path_to_subpage("Namespace:Foo") -> None
    """
    if title is None or "/" not in title:
        return None
    return title.rsplit("/", 1)[0]


def get_subpage(title: Optional[str]) -> Optional[str]:
    """
    Extract the subpage name. If there is no hierarchy above, return the title.

    Examples:
        get_subpage("Namespace:Foo/Bar/Baz") -> "Baz"
        get_subpage("Namespace:Foo") -> "Namespace:Foo"

    A trailing slash yields an empty subpage ("Foo/Bar/" -> ""), where a
    split that drops trailing empty fields would give "Bar".
    """
    if title is None:
        return None
    return title.rsplit("/", 1)[-1]


def upcase_first_char(text: str) -> str:
    """Uppercase the first character using full Unicode case mapping."""
    return text[:1].upper() + text[1:]


def uri_to_wiki(uri: Optional[str]) -> Optional[str]:
    """
    Convert a URL-ized page name into Wiki display form.

    Decodes percent-escapes, turns underscores into spaces, strips the
    characters MediaWiki forbids in titles and capitalizes the first letter.
    Malformed escapes are left as they are.

    Args:
        uri: Page name as it appears in a URL (e.g., "getting_there_%26_away")

    Returns:
        Page name in Wiki form (e.g., "Getting there & away"), or None
    """
    if uri is None:
        return None
    title = unquote(uri).replace("_", " ")
    return upcase_first_char(title.translate(_STRIP_ILLEGAL))


def wiki_to_uri(wiki: Any) -> Optional[str]:
    """
    Convert a Wiki form page name into URL form.

    Each "/"-separated segment is decoded first, so already encoded input
    is not encoded twice. Slashes and colons stay literal.

    Args:
        wiki: Page name in Wiki form (e.g., "Getting there & away"); anything
            that is not a string is converted with str()

    Returns:
        URL-safe page name (e.g., "Getting_there_%26_away"), or None
    """
    if wiki is None:
        return None
    segments = [
        quote(unquote(segment).replace(" ", "_"), safe="")
        for segment in str(wiki).split("/")
    ]
    return "/".join(segments).replace("%3A", ":")


def version() -> str:
    """Return the installed mwgateway version."""
    return __version__
