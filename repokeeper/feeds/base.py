from dataclasses import dataclass


@dataclass(frozen=True)
class FeedItem:
    """A reference from an upstream feed with its page/total progress."""

    reference: str
    page: int = 1
    total_pages: int = 1
