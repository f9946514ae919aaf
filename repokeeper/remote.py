"""
Remote repository references and their resolution.

A reference is whatever the user (or an upstream feed) hands us:

    alice/foo                              GitHub shorthand
    https://github.com/alice/foo           absolute URL
    https://gitlab.com/group/sub/project   nested namespace
    git@github.com:alice/foo.git           SCP-like SSH

RemoteResolver turns it into a RemoteRepository descriptor carrying the host,
owner, project, VCS kind and the URL to clone from. Resolution either yields a
fully populated descriptor or raises InvalidReference; it never guesses.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

from repokeeper.config import Settings
from repokeeper.exceptions import InvalidReference, UnknownHost, UnknownVcsKind
from repokeeper.vcs import CAPABILITIES, VcsKind

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = ("http", "https", "git", "ssh")

DEFAULT_HOST = "github.com"
DEFAULT_SCHEME = "https"

_HOST_RE = re.compile(
    r"^[a-z0-9]([a-z0-9-]*[a-z0-9])?(\.[a-z0-9]([a-z0-9-]*[a-z0-9])?)*$"
)
_SEGMENT_RE = re.compile(r"^[\w.~@+-]+$")
_SCP_LIKE_RE = re.compile(r"^(?:(?P<user>[\w.-]+)@)?(?P<host>[\w-]+(?:\.[\w-]+)+):(?P<path>[^/].*)$")

GITHUB_RESERVED_OWNERS = frozenset(
    ["about", "blog", "explore", "features", "marketplace", "orgs", "settings", "topics"]
)


def _validate_segment(value: str) -> str:
    if value in (".", "..") or not _SEGMENT_RE.match(value):
        raise ValueError(f"invalid path segment '{value}'")
    return value


class RemoteRepository(BaseModel):
    """Canonical, immutable description of a remote repository."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(..., description="DNS-like host name")
    owner: str = Field(..., description="First path segment")
    project: str = Field(..., description="Last path segment, VCS suffix stripped")
    namespace: Tuple[str, ...] = Field(
        (), description="Segments between owner and project on nesting forges"
    )
    vcs_kind: VcsKind
    clone_url: str = Field(..., description="Absolute URL handed to the VCS tool")

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        if not _HOST_RE.match(v):
            raise ValueError(f"invalid host '{v}'")
        return v

    @field_validator("owner", "project")
    @classmethod
    def validate_segment(cls, v: str) -> str:
        return _validate_segment(v)

    @field_validator("namespace")
    @classmethod
    def validate_namespace(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        for segment in v:
            _validate_segment(segment)
        return v

    @field_validator("clone_url")
    @classmethod
    def validate_clone_url(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ALLOWED_SCHEMES or not parsed.netloc:
            raise ValueError(f"clone URL must be absolute http(s)/git/ssh: '{v}'")
        return v

    @property
    def path_parts(self) -> Tuple[str, ...]:
        """Local path segments: host, owner, namespace..., project."""
        return (self.host, self.owner, *self.namespace, self.project)

    def __str__(self) -> str:
        return "/".join(self.path_parts)


@dataclass(frozen=True)
class HostConvention:
    """
    What we know about a hosting service.

    `vcs_kind` is None when the host serves several VCS kinds and the URL alone
    does not say which one; such hosts need a `[hosts]` override.
    """

    vcs_kind: Optional[VcsKind]
    scheme: Optional[str] = None
    nested: bool = True


KNOWN_HOSTS: Dict[str, HostConvention] = {
    "github.com": HostConvention(VcsKind.git, scheme="https", nested=False),
    "gitlab.com": HostConvention(VcsKind.git, scheme="https"),
    "codeberg.org": HostConvention(VcsKind.git, scheme="https"),
    "bitbucket.org": HostConvention(None, scheme="https", nested=False),
    "code.google.com": HostConvention(None, scheme="https"),
}

GENERIC_HOST = HostConvention(VcsKind.git)


class RemoteResolver:
    """Resolves reference strings into RemoteRepository descriptors."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        known_hosts: Optional[Mapping[str, HostConvention]] = None,
    ):
        self.host_overrides: Mapping[str, str] = settings.host_vcs if settings else {}
        self.known_hosts = dict(KNOWN_HOSTS if known_hosts is None else known_hosts)

    def resolve(self, reference: str) -> RemoteRepository:
        """
        Resolve a reference string into a descriptor.

        Args:
            reference: URL, SCP-like SSH address or `owner/project` shorthand

        Returns:
            A fully populated RemoteRepository

        Raises:
            InvalidReference: If the reference is malformed or incomplete
            UnknownHost: If the host part is missing or not a DNS-like name
            UnknownVcsKind: If the VCS kind served by the host is ambiguous
        """
        scheme, netloc, host, path = self._split(reference)

        if not host or not _HOST_RE.match(host):
            raise UnknownHost(reference, f"unrecognized host '{host}'")

        convention = self.known_hosts.get(host, GENERIC_HOST)
        vcs_kind = self._vcs_kind_for(reference, host, convention)

        segments = path.strip("/").split("/") if path.strip("/") else []
        if len(segments) < 2:
            raise InvalidReference(reference, "expected at least owner and project")
        if not convention.nested and len(segments) != 2:
            raise InvalidReference(reference, f"{host} repositories are owner/project")
        if host == "github.com" and segments[0] in GITHUB_RESERVED_OWNERS:
            raise InvalidReference(reference, f"'{segments[0]}' is not a GitHub owner")

        raw_project = segments[-1]
        project = raw_project
        suffix = CAPABILITIES[vcs_kind].url_suffix
        if suffix and project.endswith(suffix):
            project = project[: -len(suffix)]

        if convention.scheme and scheme != "ssh":
            # Never downgrade an explicit https to http
            scheme = convention.scheme
        clone_path = "/".join(segments[:-1] + [raw_project])

        try:
            remote = RemoteRepository(
                host=host,
                owner=segments[0],
                namespace=tuple(segments[1:-1]),
                project=project,
                vcs_kind=vcs_kind,
                clone_url=f"{scheme}://{netloc}/{clone_path}",
            )
        except ValueError as e:
            raise InvalidReference(reference, _first_error(e)) from e

        logger.debug(f"Resolved {reference} to {remote} ({remote.vcs_kind.value})")
        return remote

    def _split(self, reference: str) -> Tuple[str, str, str, str]:
        """Break a reference into (scheme, netloc, host, path)."""
        reference = reference.strip()
        if not reference or any(c.isspace() for c in reference):
            raise InvalidReference(reference, "not a URL")

        if "://" in reference:
            try:
                parsed = urlparse(reference)
                host = (parsed.hostname or "").lower()
            except ValueError as e:
                raise InvalidReference(reference, str(e)) from e
            if parsed.scheme not in ALLOWED_SCHEMES:
                raise InvalidReference(reference, f"unsupported scheme '{parsed.scheme}'")
            return parsed.scheme, parsed.netloc, host, parsed.path

        scp = _SCP_LIKE_RE.match(reference)
        if scp:
            host = scp.group("host").lower()
            user = scp.group("user")
            netloc = f"{user}@{host}" if user else host
            return "ssh", netloc, host, "/" + scp.group("path")

        # GitHub shorthand: owner/project
        return DEFAULT_SCHEME, DEFAULT_HOST, DEFAULT_HOST, "/" + reference.lstrip("/")

    def _vcs_kind_for(
        self, reference: str, host: str, convention: HostConvention
    ) -> VcsKind:
        override = self.host_overrides.get(host)
        if override is not None:
            try:
                return VcsKind(override)
            except ValueError:
                raise UnknownVcsKind(
                    reference, f"unknown VCS '{override}' configured for {host}"
                ) from None
        if convention.vcs_kind is None:
            raise UnknownVcsKind(
                reference,
                f"{host} serves several VCS kinds; set one under [hosts] in the config",
            )
        return convention.vcs_kind


def _first_error(error: ValueError) -> str:
    errors = getattr(error, "errors", None)
    if callable(errors):
        details = errors()
        if details:
            return str(details[0].get("msg", error))
    return str(error)
