"""Git URL parsing and provider-kind inference."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlparse

from gitops_status.models import GitKind

# git@host:owner/repo.git
_SCP_LIKE = re.compile(r"^(?:[\w.+-]+@)?(?P<host>[\w.-]+):(?P<path>[^/].*)$")


@dataclass
class GitRepository:
    host: str
    organisation: str
    name: str
    url: str

    @property
    def full_name(self) -> str:
        return join_repo(self.organisation, self.name)


def join_repo(owner: str, name: str) -> str:
    return f"{owner}/{name}"


def split_repo(full_name: str) -> tuple[str, str]:
    """Split ``owner/name`` at the last slash so nested groups stay in the owner."""
    owner, _, name = full_name.rpartition("/")
    return owner, name


def parse_git_url(text: str) -> GitRepository | None:
    """Parse a git URL, returning None on failure.

    Accepts http(s), ssh and git schemes as well as scp-style
    ``user@host:owner/repo`` addresses.
    """
    text = (text or "").strip()
    if not text:
        return None

    if "://" in text:
        parsed = urlparse(text)
        host = parsed.hostname or ""
        path = parsed.path
    else:
        m = _SCP_LIKE.match(text)
        if not m:
            return None
        host = m.group("host")
        path = m.group("path")

    if not host:
        return None

    segments = [s for s in path.split("/") if s]
    # Bitbucket Server clone URLs are served under /scm/
    if segments and segments[0] == "scm":
        segments = segments[1:]
    if len(segments) < 2:
        return None

    name = segments[1]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    if not name:
        return None
    return GitRepository(host=host, organisation=segments[0], name=name, url=text)


def saas_git_kind(server: str) -> str:
    """Infer the provider kind for well known SaaS git hosts.

    Returns an empty string when the server is not recognised.
    """
    server = server.rstrip("/")
    for scheme in ("https://", "http://"):
        if server.startswith(scheme):
            host = server[len(scheme):]
            break
    else:
        host = server

    if host == "github.com" or server.startswith("https://github"):
        return GitKind.GITHUB.value
    if host == "gitlab.com":
        return GitKind.GITLAB.value
    if host == "bitbucket.org":
        return GitKind.BITBUCKET_CLOUD.value
    return ""
