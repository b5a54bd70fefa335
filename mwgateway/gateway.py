#!/usr/bin/env python3
"""
MediaWiki gateway for building page URLs and action API requests.

Provides:
- Page URLs from wiki-form titles, and titles back out of page URLs
- Prepared (unsent) API requests for reading, creating and editing pages
- Proper logging

Sending the prepared requests, logging in and fetching edit tokens are left
to the caller's transport.

Usage:
    from mwgateway.gateway import WikiGateway

    gw = WikiGateway(
        api_url="https://wiki.example.com/api.php",
        article_url="https://wiki.example.com/wiki",
        wiki_name="ExampleWiki",
    )
    gw.page_url("Help:Getting there & away")
    # "https://wiki.example.com/wiki/Help:Getting_there_%26_away"
    request = gw.create_request("Sandbox", "Hello", summary="test")
"""

import logging
from typing import Mapping, Optional
from urllib.parse import urlsplit

import requests

from mwgateway import config as mwconfig
from mwgateway.utils import uri_to_wiki, wiki_to_uri

# Edit token MediaWiki hands out to anonymous sessions
ANONYMOUS_TOKEN = "+\\"


class WikiGateway:
    """Builds page URLs and MediaWiki action API requests for one wiki."""

    def __init__(
        self,
        api_url: str,
        article_url: Optional[str] = None,
        wiki_name: str = "Wiki",
        user_agent: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the gateway.

        Args:
            api_url: MediaWiki API endpoint (e.g., https://wiki.example.com/api.php)
            article_url: Base URL of article pages (e.g., https://wiki.example.com/wiki)
            wiki_name: Human-readable wiki name for logging
            user_agent: Custom user agent string
            logger: Logger instance (creates one if not provided)
        """
        self.api_url = api_url
        self.article_url = article_url.rstrip("/") if article_url else None
        self.wiki_name = wiki_name

        self.logger = logger or logging.getLogger(f"mwgateway.{wiki_name}")

        # Only used to merge default headers into prepared requests
        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": user_agent or f"{wiki_name}-Gateway/1.0 (mwgateway)",
            "Accept": "application/json",
        })

    @classmethod
    def from_config(cls, config: Mapping, logger: Optional[logging.Logger] = None) -> "WikiGateway":
        """
        Create a gateway from a config dict (see mwgateway.config).

        Raises:
            ConfigError: If no wiki URL is configured
        """
        return cls(
            api_url=mwconfig.api_url(config),
            article_url=mwconfig.article_url(config),
            wiki_name=config.get("wiki_name") or "Wiki",
            user_agent=config.get("user_agent"),
            logger=logger,
        )

    def page_url(self, title: str) -> str:
        """
        Build the URL of a page.

        Args:
            title: Page title in Wiki form (e.g., "User:John/Sandbox")

        Returns:
            Absolute page URL with the title in URL form

        Raises:
            ValueError: If the gateway has no article URL
        """
        if not self.article_url:
            raise ValueError(f"No article URL configured for {self.wiki_name}")
        return f"{self.article_url}/{wiki_to_uri(title)}"

    def title_from_url(self, url: str) -> Optional[str]:
        """
        Extract the page title from a page URL of this wiki.

        Understands both article URLs (/wiki/Some_Page) and script URLs
        (/index.php?title=Some_Page&action=history).

        Returns:
            Page title in Wiki form, or None if the URL is not a page of this wiki
        """
        target = urlsplit(url)
        base = urlsplit(self.article_url or self.api_url)

        if target.netloc and target.netloc.lower() != base.netloc.lower():
            return None

        # Not parse_qsl: the raw value must be decoded only once, by uri_to_wiki
        for pair in target.query.split("&"):
            key, _, value = pair.partition("=")
            if key == "title" and value:
                return uri_to_wiki(value)

        if not self.article_url:
            return None
        prefix = base.path.rstrip("/") + "/"
        if target.path.startswith(prefix) and len(target.path) > len(prefix):
            return uri_to_wiki(target.path[len(prefix):])
        return None

    def prepare(self, params: dict, method: str = "GET") -> requests.PreparedRequest:
        """
        Prepare an API request without sending it.

        Args:
            params: Parameters for the API call (format=json is added)
            method: "GET" puts params in the query string, "POST" in the body

        Returns:
            Prepared request carrying the session's default headers
        """
        params = dict(params)
        params["format"] = "json"

        method = method.upper()
        if method == "POST":
            request = requests.Request("POST", self.api_url, data=params)
        else:
            request = requests.Request(method, self.api_url, params=params)
        return self.session.prepare_request(request)

    def read_request(self, title: str) -> requests.PreparedRequest:
        """Prepare a request for the current wikitext of a page."""
        self.logger.debug(f"[{self.wiki_name}] preparing read of {title}")
        return self.prepare({
            "action": "query",
            "prop": "revisions",
            "rvprop": "content",
            "titles": title,
        })

    def create_request(
        self,
        title: str,
        content: str,
        summary: Optional[str] = None,
        overwrite: bool = False,
        token: str = ANONYMOUS_TOKEN,
    ) -> requests.PreparedRequest:
        """
        Prepare a request that creates a page.

        Args:
            title: Page title in Wiki form
            content: Wikitext of the new page
            summary: Edit summary
            overwrite: Replace the page if it already exists
            token: Edit token (default: the anonymous token)

        Returns:
            Prepared POST request
        """
        self.logger.debug(f"[{self.wiki_name}] preparing create of {title} (overwrite={overwrite})")
        params = {"action": "edit", "title": title, "text": content, "token": token}
        if summary:
            params["summary"] = summary
        if not overwrite:
            params["createonly"] = "1"
        return self.prepare(params, method="POST")

    def edit_request(
        self,
        title: str,
        content: str,
        summary: Optional[str] = None,
        token: str = ANONYMOUS_TOKEN,
    ) -> requests.PreparedRequest:
        """Prepare a request that replaces the text of an existing page."""
        self.logger.debug(f"[{self.wiki_name}] preparing edit of {title}")
        params = {
            "action": "edit",
            "title": title,
            "text": content,
            "token": token,
            "nocreate": "1",
        }
        if summary:
            params["summary"] = summary
        return self.prepare(params, method="POST")
