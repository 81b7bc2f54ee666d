"""Per-server cache of git provider clients."""

from __future__ import annotations

import logging
from typing import Callable

from gitops_status.core.errors import ProviderResolutionError
from gitops_status.core.scm_client import ScmClient, new_scm_client
from gitops_status.utils.git_url import saas_git_kind

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str, str, str], ScmClient]


class ScmClientRegistry:
    """Creates one client per git server and reuses it for the process lifetime.

    Clients are keyed by server, not owner, so several owners on one server
    share a client. The registry is not thread safe: it is only mutated by
    the single driver loop. Add a lock here before processing repositories
    in parallel.
    """

    def __init__(self, token: str = "", factory: ClientFactory | None = None):
        self.token = token
        self.factory = factory or new_scm_client
        self._clients: dict[str, ScmClient] = {}

    def __contains__(self, server: str) -> bool:
        return server in self._clients

    def __len__(self) -> int:
        return len(self._clients)

    def register(self, server: str, client: ScmClient) -> None:
        self._clients[server] = client

    def get_or_create(self, owner: str, server: str, kind: str = "") -> ScmClient:
        client = self._clients.get(server)
        if client is not None:
            return client

        if not server:
            raise ProviderResolutionError(f"no provider defined for owner {owner}")
        if not kind:
            kind = saas_git_kind(server)
        if not kind:
            raise ProviderResolutionError(f"no git provider kind for owner {owner}")

        client = self.factory(kind, server, self.token)
        logger.debug("created %s client for %s", kind, server)
        self._clients[server] = client
        return client
