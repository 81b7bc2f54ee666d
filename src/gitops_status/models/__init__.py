"""Data models for GitOps deployment status reporting."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class GitKind(enum.Enum):
    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET_CLOUD = "bitbucketcloud"
    BITBUCKET_SERVER = "bitbucketserver"
    GITEA = "gitea"

    @classmethod
    def from_str(cls, s: str) -> GitKind | None:
        for member in cls:
            if member.value == s:
                return member
        return None


@dataclass
class Environment:
    name: str = ""
    url: str = ""
