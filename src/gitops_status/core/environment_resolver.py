"""Map deployment namespaces to environment names and git URLs."""

from __future__ import annotations

import re

from gitops_status.config.settings import settings
from gitops_status.models import Environment
from gitops_status.models.requirements import EnvironmentConfig, Requirements

DEV_KEY = "dev"

_WORD_RE = re.compile(r"\w+")


def title_case(s: str) -> str:
    """Uppercase the first letter of each word, leaving the rest untouched.

    Letters, digits and underscores form words, so ``v2x`` becomes ``V2x``
    and ``pre-prod`` becomes ``Pre-Prod``.
    """
    return _WORD_RE.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:], s)


def environment_git_url(requirements: Requirements, env: EnvironmentConfig) -> str:
    """Return the git URL of an environment repository.

    Uses the explicit ``gitUrl`` when set, otherwise builds one from the
    cluster git server and the environment (or cluster) owner.
    """
    if env.git_url:
        return env.git_url
    cluster = requirements.cluster
    owner = env.owner or cluster.environment_git_owner
    repository = env.repository
    if not repository and cluster.cluster_name:
        repository = f"environment-{cluster.cluster_name}-{env.key}"
    if not owner or not repository:
        return ""
    server = (cluster.git_server or settings.default_git_server).rstrip("/")
    return f"{server}/{owner}/{repository}.git"


class EnvironmentResolver:
    """Resolves the environment for a namespace.

    Requirements are often partial, so namespaces without an entry fall back
    to a name derived from the namespace and the dev environment URL.
    """

    def __init__(self, names: dict[str, str] | None = None, urls: dict[str, str] | None = None):
        self.names: dict[str, str] = names or {}
        self.urls: dict[str, str] = urls or {}

    @classmethod
    def from_requirements(cls, requirements: Requirements) -> EnvironmentResolver:
        names: dict[str, str] = {}
        urls: dict[str, str] = {}
        for env in requirements.environments:
            ns = env.effective_namespace
            names[ns] = title_case(env.key)
            url = environment_git_url(requirements, env)
            urls[ns] = url
            if env.key == DEV_KEY:
                urls[DEV_KEY] = url
        return cls(names, urls)

    def lookup(self, namespace: str) -> Environment:
        name = self.names.get(namespace, "")
        url = self.urls.get(namespace, "")
        if not name:
            name = title_case(namespace.removeprefix("jx-"))
        if not url:
            url = self.urls.get(DEV_KEY, "")
        return Environment(name=name, url=url)
