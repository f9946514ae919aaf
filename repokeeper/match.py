"""Querying discovered working copies by name"""

from collections import Counter
from typing import Iterable, List, Optional

from repokeeper.exceptions import AmbiguousMatch, NoMatch
from repokeeper.local import LocalRepository


def select_repositories(
    repos: Iterable[LocalRepository], query: Optional[str] = None, exact: bool = False
) -> List[LocalRepository]:
    """
    Filter repositories for listing.

    Args:
        repos: Repositories to filter, order is kept
        query: Name to look for; no query selects everything
        exact: Match whole subpaths instead of substrings of the non-host path

    Returns:
        The selected repositories
    """
    if not query:
        return list(repos)
    if exact:
        return [repo for repo in repos if repo.matches(query)]
    return [repo for repo in repos if query in repo.non_host_path]


class RepositoryIndex:
    """Subpath counts across a set of repositories.

    A subpath identifies a repository only when no other repository in the
    set shares it: with github.com/alice/foo and github.com/bob/foo both
    present, "foo" names neither while "alice/foo" still names the first.
    """

    def __init__(self, repos: Iterable[LocalRepository]):
        self.repositories = list(repos)
        self.subpath_counts = Counter(
            p for repo in self.repositories for p in repo.subpaths()
        )

    def unique_subpath(self, repo: LocalRepository) -> Optional[str]:
        """The shortest subpath of `repo` that no other repository has."""
        for p in repo.subpaths():
            if self.subpath_counts[p] == 1:
                return p
        return None

    def unique_subpaths(self) -> List[str]:
        """Shortest unique subpath of every repository that has one."""
        paths = (self.unique_subpath(repo) for repo in self.repositories)
        return [p for p in paths if p is not None]

    def matches(self, repo: LocalRepository, query: str) -> bool:
        """True if `query` is a subpath of `repo` and of no other repository."""
        return repo.matches(query) and self.subpath_counts[query] == 1

    def look(self, query: str) -> LocalRepository:
        """
        Find the single repository named by `query`.

        Raises:
            NoMatch: If no repository has `query` as a subpath
            AmbiguousMatch: If several do; `candidates` lists all of them
        """
        for repo in self.repositories:
            if self.matches(repo, query):
                return repo

        candidates = [repo for repo in self.repositories if repo.matches(query)]
        if not candidates:
            raise NoMatch(query)
        raise AmbiguousMatch(query, candidates)
