"""
Upstream sources of repository references.

Feeds only produce reference strings; resolving and cloning them is left to
GetOrchestrator.get_many.
"""

from .base import FeedItem
from .github import GitHubStarredFeed
from .pocket import PocketFeed

__all__ = ["FeedItem", "GitHubStarredFeed", "PocketFeed"]
