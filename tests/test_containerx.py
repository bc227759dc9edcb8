from concurrent.futures import ThreadPoolExecutor

import pytest

from daggerkit.containerx import (
    BaseContainerOpts,
    get_image_url,
    set_default_image_name_if_empty,
    set_default_image_version_if_empty,
    validate_image_url,
)
from daggerkit.fixtures import IMAGE


@pytest.mark.parametrize(
    "image, fallback, expected",
    [
        ("ubuntu", "alpine", "ubuntu"),
        ("", "alpine", "alpine"),
        ("", "", IMAGE),
    ],
)
def test_set_default_image_name_if_empty(image, fallback, expected):
    assert set_default_image_name_if_empty(image, fallback) == expected


@pytest.mark.parametrize(
    "version, fallback, expected",
    [
        ("1.0", "2.0", "1.0"),
        ("", "2.0", "2.0"),
        ("", "", "latest"),
    ],
)
def test_set_default_image_version_if_empty(version, fallback, expected):
    assert set_default_image_version_if_empty(version, fallback) == expected


@pytest.mark.parametrize(
    "opts, expected",
    [
        (BaseContainerOpts(image="ubuntu", version="20.04"), "ubuntu:20.04"),
        (BaseContainerOpts(fallback_image="alpine", fallback_version="3.14"), "alpine:3.14"),
        (BaseContainerOpts(image="", fallback_image=""), f"{IMAGE}:latest"),
    ],
)
def test_get_image_url(opts, expected):
    assert get_image_url(opts) == expected


def test_get_image_url_none():
    with pytest.raises(ValueError, match="^failed to create base container: opts is nil$"):
        get_image_url(None)


@pytest.mark.parametrize(
    "image_url",
    [
        "ubuntu",
        "ubuntu:20.04",
        "ubuntu@sha256:1234567890abcdef1234567890abcdef1234567890abcdef1234567890abcdef",
        "ubuntu:20.04@sha256:abcdef1234567890abcdef1234567890abcdef1234567890abcdef1234567890",
        "docker.io/library/ubuntu:20.04",
        "123456789.dkr.ecr.us-west-2.amazonaws.com/my-app:v1.0.0",
        "ghcr.io/username/repo:tag",
        "gcr.io/project-id/image:tag",
        "quay.io/username/repo:tag",
        "registry.com:8080/path/to/repo:tag",
        "123456789.dkr.ecr.us-west-2.amazonaws.com/my-repo:latest",
    ],
)
def test_validate_image_url_valid(image_url):
    assert validate_image_url(image_url) is True


@pytest.mark.parametrize(
    "image_url, message",
    [
        ("", "image URL cannot be empty"),
        ("invalid..registry/image:tag", "invalid registry: invalid..registry"),
        ("invalid@repo:tag", "invalid repository name: invalid@repo:tag"),
        ("registry/repo:invalid_tag!", "invalid tag: invalid_tag!"),
        ("registry/repo@sha256:invalid", "invalid digest: sha256:invalid"),
        ("a/b/c/d/e:tag", "too many components in image URL"),
    ],
)
def test_validate_image_url_invalid(image_url, message):
    with pytest.raises(ValueError) as excinfo:
        validate_image_url(image_url)
    assert str(excinfo.value) == message


def test_validate_image_url_empty_tag():
    with pytest.raises(ValueError, match="^tag cannot be empty$"):
        validate_image_url("registry.com/my_repo:")


def test_validate_image_url_at_in_namespace():
    with pytest.raises(ValueError, match="invalid '@' character in repository name: a@b"):
        validate_image_url("a@b/repo:tag")


def test_validate_image_url_invalid_namespace():
    with pytest.raises(ValueError, match="^invalid namespace: bad__ns$"):
        validate_image_url("docker.io/bad__ns/group/repo")


def test_validate_image_url_invalid_repository_component():
    with pytest.raises(ValueError, match="^invalid repository: bad__repo$"):
        validate_image_url("bad__repo/image")


VALID_URLS = [
    "ubuntu:latest",
    "python:3.12",
    "registry.gitlab.com/group/project/image:tag",
    "docker.io/library/redis:6.2",
    "123456789012.dkr.ecr.us-west-2.amazonaws.com/my-app:latest",
    "public.ecr.aws/registry/my-app:latest",
    "gcr.io/project-id/my-app:latest",
    "my-registry.com:5000/my-app:latest",
]

INVALID_URLS = [
    "invalid@repo:tag",
    "registry.com/my_repo:",
    "::",
    "registry.com/my-app@sha256:not-a-valid-hash",
]


def _check(url):
    try:
        return validate_image_url(url)
    except ValueError:
        return False


def test_validate_image_url_concurrent():
    with ThreadPoolExecutor(max_workers=4) as pool:
        valid_results = list(pool.map(_check, VALID_URLS))
        invalid_results = list(pool.map(_check, INVALID_URLS))
    assert valid_results == [True] * len(VALID_URLS)
    assert invalid_results == [False] * len(INVALID_URLS)
    assert [validate_image_url(url) for url in VALID_URLS] == valid_results
    for url in INVALID_URLS:
        with pytest.raises(ValueError):
            validate_image_url(url)