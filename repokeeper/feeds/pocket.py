"""github.com entries saved in Pocket"""

import logging
from typing import Iterator, Optional

import requests

from repokeeper.exceptions import FeedError
from repokeeper.utils import format_action

from .base import FeedItem

logger = logging.getLogger(__name__)

POCKET_GET_URL = "https://getpocket.com/v3/get"


class PocketFeed:
    """
    Retrieves every saved Pocket item on github.com.

    Needs a consumer key and an already authorized access token; obtaining
    the token is not handled here.
    """

    def __init__(
        self,
        consumer_key: str,
        access_token: str,
        session: Optional[requests.Session] = None,
        url: str = POCKET_GET_URL,
    ):
        self.consumer_key = consumer_key
        self.access_token = access_token
        self.session = session or requests.Session()
        self.url = url

    def __iter__(self) -> Iterator[FeedItem]:
        logger.info(format_action("pocket", "Retrieving github.com entries"))
        try:
            response = self.session.post(
                self.url,
                json={
                    "consumer_key": self.consumer_key,
                    "access_token": self.access_token,
                    "domain": "github.com",
                    "state": "all",
                    "detailType": "simple",
                },
                headers={"X-Accept": "application/json"},
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise FeedError(f"Could not retrieve Pocket entries: {e}") from e
        except ValueError as e:
            raise FeedError(f"Malformed response from Pocket: {e}") from e

        # Pocket sends an empty JSON array instead of an object when nothing matches
        entries = payload.get("list") if isinstance(payload, dict) else None
        if not entries:
            return
        if not isinstance(entries, dict):
            raise FeedError(f"Malformed response from Pocket: list is a {type(entries).__name__}")

        for key, item in entries.items():
            if not isinstance(item, dict):
                logger.error(format_action("error", f"Malformed Pocket entry: {key}"))
                continue
            url = item.get("resolved_url") or item.get("given_url")
            if not url:
                logger.error(format_action("error", f"Pocket entry without URL: {item.get('item_id')}"))
                continue
            yield FeedItem(url)
