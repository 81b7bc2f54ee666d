from gitops_status.core.repo_matcher import resolve_repository

PROVIDER = "https://github.com"
OWNER = "myorg"
FULL_NAME = "myorg/my-chart"


def test_no_sources_keeps_assumed_name():
    assert resolve_repository(FULL_NAME, [], PROVIDER, OWNER) == FULL_NAME


def test_confirming_source_keeps_assumed_name():
    sources = [
        "https://github.com/myorg/other-repo",
        "https://github.com/myorg/my-chart.git",
    ]
    assert resolve_repository(FULL_NAME, sources, PROVIDER, OWNER) == FULL_NAME


def test_same_owner_alternative_is_used():
    sources = ["https://github.com/myorg/my-service"]
    assert resolve_repository(FULL_NAME, sources, PROVIDER, OWNER) == "myorg/my-service"


def test_same_owner_preferred_over_other_owner():
    sources = [
        "https://github.com/myorg/my-service",
        "https://github.com/upstream/my-service",
    ]
    assert resolve_repository(FULL_NAME, sources, PROVIDER, OWNER) == "myorg/my-service"


def test_other_owner_used_when_nothing_in_owner():
    sources = ["git@github.com:upstream/my-service.git"]
    assert resolve_repository(FULL_NAME, sources, PROVIDER, OWNER) == "upstream/my-service"


def test_last_same_owner_alternative_wins():
    sources = [
        "https://github.com/myorg/first",
        "https://github.com/myorg/second",
    ]
    assert resolve_repository(FULL_NAME, sources, PROVIDER, OWNER) == "myorg/second"


def test_sources_on_other_hosts_are_ignored():
    sources = ["https://gitlab.com/myorg/my-service"]
    assert resolve_repository(FULL_NAME, sources, PROVIDER, OWNER) == FULL_NAME


def test_host_match_is_substring_of_provider():
    # an enterprise provider URL with a path still contains the source host
    sources = ["https://github.example.com/myorg/my-service"]
    provider = "https://github.example.com/enterprise"
    assert resolve_repository(FULL_NAME, sources, provider, OWNER) == "myorg/my-service"


def test_unparsable_sources_are_skipped(caplog):
    sources = ["not a url", "https://github.com/myorg/my-service"]
    with caplog.at_level("WARNING"):
        result = resolve_repository(FULL_NAME, sources, PROVIDER, OWNER)
    assert result == "myorg/my-service"
    assert "failed to parse git URL not a url" in caplog.text
