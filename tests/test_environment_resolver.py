import pytest

from gitops_status.core.environment_resolver import EnvironmentResolver, environment_git_url, title_case
from gitops_status.models.requirements import Requirements

DEV_URL = "https://github.com/myorg/environment-mycluster-dev.git"


def make_requirements(**cluster_overrides):
    cluster = {
        "gitServer": "https://github.com",
        "environmentGitOwner": "myorg",
        "clusterName": "mycluster",
    }
    cluster.update(cluster_overrides)
    return Requirements.from_dict({
        "spec": {
            "cluster": cluster,
            "environments": [
                {"key": "dev"},
                {"key": "staging"},
                {"key": "production", "namespace": "prod-apps", "gitUrl": "https://github.com/myorg/prod-env.git"},
            ],
        },
    })


def test_explicit_namespace_entry():
    resolver = EnvironmentResolver.from_requirements(make_requirements())
    env = resolver.lookup("prod-apps")
    assert env.name == "Production"
    assert env.url == "https://github.com/myorg/prod-env.git"


def test_default_namespaces_are_derived_from_key():
    resolver = EnvironmentResolver.from_requirements(make_requirements())
    assert resolver.lookup("jx").name == "Dev"
    assert resolver.lookup("jx").url == DEV_URL
    staging = resolver.lookup("jx-staging")
    assert staging.name == "Staging"
    assert staging.url == "https://github.com/myorg/environment-mycluster-staging.git"


def test_missing_namespace_falls_back_to_dev_url():
    resolver = EnvironmentResolver.from_requirements(make_requirements())
    env = resolver.lookup("jx-pre-prod")
    assert env.name == "Pre-Prod"
    assert env.url == DEV_URL


def test_missing_url_falls_back_to_dev_url():
    requirements = Requirements.from_dict({
        "spec": {
            "cluster": {"environmentGitOwner": "myorg"},
            "environments": [{"key": "dev", "repository": "my-dev-env"}, {"key": "staging"}],
        },
    })
    resolver = EnvironmentResolver.from_requirements(requirements)
    env = resolver.lookup("jx-staging")
    assert env.name == "Staging"
    assert env.url == "https://github.com/myorg/my-dev-env.git"


def test_empty_requirements_are_tolerated():
    resolver = EnvironmentResolver.from_requirements(Requirements())
    env = resolver.lookup("jx-staging")
    assert env.name == "Staging"
    assert env.url == ""


def test_environment_git_url_uses_env_owner():
    requirements = make_requirements(gitServer="https://github.example.com/")
    env = requirements.environments[1]
    env.owner = "other"
    assert environment_git_url(requirements, env) == "https://github.example.com/other/environment-mycluster-staging.git"


@pytest.mark.parametrize("value,expected", [
    ("staging", "Staging"),
    ("v2x", "V2x"),
    ("pre-prod", "Pre-Prod"),
    ("qa_eu", "Qa_eu"),
    ("UAT", "UAT"),
    ("", ""),
])
def test_title_case(value, expected):
    assert title_case(value) == expected


def test_fallback_names_keep_digits_inside_words():
    resolver = EnvironmentResolver.from_requirements(make_requirements())
    assert resolver.lookup("jx-v2x").name == "V2x"
    assert resolver.lookup("jx-pre-prod").name == "Pre-Prod"
