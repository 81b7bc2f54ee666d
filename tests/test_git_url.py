import pytest

from gitops_status.utils.git_url import parse_git_url, saas_git_kind, split_repo


@pytest.mark.parametrize("url,host,org,name", [
    ("https://github.com/myorg/myrepo", "github.com", "myorg", "myrepo"),
    ("https://github.com/myorg/myrepo.git", "github.com", "myorg", "myrepo"),
    ("https://github.com/myorg/myrepo/tree/main/charts", "github.com", "myorg", "myrepo"),
    ("git@github.com:myorg/myrepo.git", "github.com", "myorg", "myrepo"),
    ("ssh://git@bitbucket.example.com:7999/proj/myrepo.git", "bitbucket.example.com", "proj", "myrepo"),
    ("https://bitbucket.example.com/scm/proj/myrepo.git", "bitbucket.example.com", "proj", "myrepo"),
])
def test_parse_git_url(url, host, org, name):
    info = parse_git_url(url)
    assert info is not None
    assert (info.host, info.organisation, info.name) == (host, org, name)
    assert info.full_name == f"{org}/{name}"


@pytest.mark.parametrize("url", ["", "not a url", "https://github.com/onlyorg", "https:///myorg/myrepo"])
def test_parse_git_url_failures(url):
    assert parse_git_url(url) is None


@pytest.mark.parametrize("server,kind", [
    ("https://github.com", "github"),
    ("https://github.com/", "github"),
    ("http://gitlab.com", "gitlab"),
    ("https://bitbucket.org", "bitbucketcloud"),
    ("https://git.example.com", ""),
])
def test_saas_git_kind(server, kind):
    assert saas_git_kind(server) == kind


def test_split_repo_keeps_nested_owner():
    assert split_repo("group/subgroup/repo") == ("group/subgroup", "repo")
