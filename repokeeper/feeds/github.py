"""Starred repositories of a GitHub user"""

import logging
from typing import Any, Iterator, List, Optional, Tuple
from urllib.parse import parse_qs, urlparse

import requests

from repokeeper.exceptions import FeedError
from repokeeper.utils import format_action

from .base import FeedItem

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"


class GitHubStarredFeed:
    """
    Iterates over every repository a user has starred, oldest star first.

    Pages are fetched lazily, one request per page, following the `Link`
    header to learn the last page number.
    """

    def __init__(
        self,
        user: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        api_url: str = GITHUB_API_URL,
    ):
        self.user = user
        self.token = token
        self.session = session or requests.Session()
        self.api_url = api_url.rstrip("/")

    def __iter__(self) -> Iterator[FeedItem]:
        page = 1
        while True:
            repositories, last_page = self._fetch_page(page)
            logger.info(format_action("page", f"{page}/{last_page}"))

            for repo in repositories:
                url = repo.get("html_url") if isinstance(repo, dict) else None
                if not url:
                    logger.error(format_action("error", f"Starred entry without URL: {repo}"))
                    continue
                yield FeedItem(url, page, last_page)

            if page >= last_page:
                break
            page += 1

    def _fetch_page(self, page: int) -> Tuple[List[Any], int]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        url = f"{self.api_url}/users/{self.user}/starred"
        try:
            response = self.session.get(
                url, params={"sort": "created", "page": page}, headers=headers
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise FeedError(f"Could not list starred repositories of {self.user}: {e}") from e
        except ValueError as e:
            raise FeedError(f"Malformed response from {url}: {e}") from e

        if not isinstance(payload, list):
            raise FeedError(f"Unexpected response from {url}: expected a list")

        return payload, _last_page(response, page)


def _last_page(response: requests.Response, current: int) -> int:
    """Last page number from the Link header; the current page if there is none."""
    last = response.links.get("last", {}).get("url")
    if not last:
        return current
    try:
        return int(parse_qs(urlparse(last).query)["page"][0])
    except (KeyError, IndexError, ValueError):
        return current
