"""Resolve the git repository behind a release from its chart sources."""

from __future__ import annotations

import logging

from gitops_status.utils.git_url import GitRepository, parse_git_url

logger = logging.getLogger(__name__)


def resolve_repository(
    full_name: str,
    sources: list[str],
    provider: str,
    owner: str,
) -> str:
    """Return the repository to report against for a release.

    ``full_name`` is the ``owner/name`` assumed from the release name. Chart
    names often differ from the repository that builds them, so the chart
    sources are checked. Only sources hosted on ``provider`` are considered,
    as statuses can only be written to the server being updated. A source
    containing ``full_name`` confirms it; otherwise the last source under the
    same owner is preferred, then the last source under any other owner.
    """
    if not sources:
        return full_name

    in_owner: GitRepository | None = None
    other: GitRepository | None = None
    for source in sources:
        info = parse_git_url(source)
        if info is None:
            logger.warning("failed to parse git URL %s from chart source", source)
            continue
        if info.host not in provider:
            continue
        if full_name in source:
            return full_name
        if info.organisation == owner:
            in_owner = info
        else:
            other = info

    alternative = in_owner or other
    if alternative is not None:
        logger.debug("using repository %s from chart sources instead of %s", alternative.full_name, full_name)
        return alternative.full_name
    return full_name
