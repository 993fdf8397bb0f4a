"""Tests for resolved configuration records."""

import pytest
from pydantic import SecretStr, ValidationError

from renovate_config.models.config import MASKED_SECRET, HostRule, RenovateConfig
from renovate_config.testing.factories import HostRuleFactory, RenovateConfigFactory


def test_to_renovate_dict_has_exactly_five_keys() -> None:
    """Rendered record carries exactly the keys the bot loads."""
    config = RenovateConfigFactory.build()

    data = config.to_renovate_dict()

    assert set(data) == {"platform", "endpoint", "token", "hostRules", "repositories"}


def test_to_renovate_dict_masks_secrets_by_default() -> None:
    """Token and host rule passwords are masked unless revealed."""
    config = RenovateConfigFactory.build(
        token=SecretStr("forge-token"),
        host_rules=[HostRuleFactory.build(password=SecretStr("registry-token"))],
    )

    data = config.to_renovate_dict()

    assert data["token"] == MASKED_SECRET
    assert data["hostRules"][0]["password"] == MASKED_SECRET
    assert "forge-token" not in str(data)
    assert "registry-token" not in str(data)


def test_to_renovate_dict_reveals_secrets() -> None:
    """Secrets are written in full when explicitly requested."""
    config = RenovateConfigFactory.build(
        token=SecretStr("forge-token"),
        host_rules=[HostRuleFactory.build(password=SecretStr("registry-token"))],
    )

    data = config.to_renovate_dict(reveal_secrets=True)

    assert data["token"] == "forge-token"
    assert data["hostRules"] == [
        {
            "hostType": "npm",
            "matchHost": "pkgs.dev.azure.com",
            "username": "apikey",
            "password": "registry-token",
        }
    ]


def test_host_rules_keep_declaration_order() -> None:
    """Host rules are kept in the order they were given."""
    rules = [
        HostRuleFactory.build(host_type="npm", match_host="first.example.com"),
        HostRuleFactory.build(host_type="maven", match_host="second.example.com"),
        HostRuleFactory.build(host_type="docker", match_host="third.example.com"),
    ]
    config = RenovateConfigFactory.build(host_rules=rules)

    hosts = [rule["matchHost"] for rule in config.to_renovate_dict()["hostRules"]]

    assert hosts == ["first.example.com", "second.example.com", "third.example.com"]


def test_accepts_camel_case_keys() -> None:
    """Records validate from the bot's camelCase shape."""
    config = RenovateConfig.model_validate(
        {
            "platform": "github",
            "endpoint": "https://api.github.com/",
            "token": "forge-token",
            "hostRules": [
                {
                    "hostType": "npm",
                    "matchHost": "pkgs.dev.azure.com",
                    "username": "apikey",
                    "password": "registry-token",
                }
            ],
            "repositories": ["rabobank/shadow-tool"],
        }
    )

    assert config.host_rules[0].match_host == "pkgs.dev.azure.com"
    assert config.token.get_secret_value() == "forge-token"


def test_record_is_immutable() -> None:
    """Records cannot be mutated after construction."""
    config = RenovateConfigFactory.build()

    with pytest.raises(ValidationError):
        config.platform = "gitlab"  # type: ignore[misc]


@pytest.mark.parametrize(
    "endpoint",
    [
        "http://api.github.com/",
        "api.github.com",
        "https://",
        "ftp://api.github.com/",
    ],
)
def test_rejects_non_https_endpoint(endpoint: str) -> None:
    """Endpoint must be an https URL with a host."""
    with pytest.raises(ValidationError, match="https://"):
        RenovateConfigFactory.build(endpoint=endpoint)


@pytest.mark.parametrize(
    "repository",
    ["shadow-tool", "rabobank/", "/shadow-tool", "a/b/c", "owner/name with space"],
)
def test_rejects_malformed_repository(repository: str) -> None:
    """Repositories must be owner/name identifiers."""
    with pytest.raises(ValidationError, match="owner/name"):
        RenovateConfigFactory.build(repositories=[repository])


def test_rejects_empty_repositories() -> None:
    """At least one repository is required."""
    with pytest.raises(ValidationError):
        RenovateConfigFactory.build(repositories=[])


def test_rejects_empty_host_rules() -> None:
    """At least one host rule is required."""
    with pytest.raises(ValidationError):
        RenovateConfigFactory.build(host_rules=[])


def test_rejects_empty_token() -> None:
    """Token must not resolve to an empty string."""
    with pytest.raises(ValidationError, match="must not be empty"):
        RenovateConfigFactory.build(token=SecretStr(""))


def test_rejects_unknown_platform() -> None:
    """Platform must be one the bot recognizes."""
    with pytest.raises(ValidationError):
        RenovateConfigFactory.build(platform="sourceforge")


def test_rejects_unknown_keys() -> None:
    """Records reject keys the bot does not define."""
    with pytest.raises(ValidationError):
        RenovateConfig.model_validate(
            {
                **RenovateConfigFactory.build().to_renovate_dict(reveal_secrets=True),
                "extra": "value",
            }
        )


class TestHostRule:
    """Tests for HostRule validation."""

    def test_rejects_blank_match_host(self) -> None:
        """Host pattern must contain more than whitespace."""
        with pytest.raises(ValidationError):
            HostRule(
                host_type="npm",
                match_host="   ",
                username="apikey",
                password=SecretStr("registry-token"),
            )

    def test_rejects_empty_password(self) -> None:
        """Password must not resolve to an empty string."""
        with pytest.raises(ValidationError, match="must not be empty"):
            HostRule(
                host_type="npm",
                match_host="pkgs.dev.azure.com",
                username="apikey",
                password=SecretStr(""),
            )

    def test_password_repr_is_masked(self) -> None:
        """Password value does not appear in the repr."""
        rule = HostRuleFactory.build(password=SecretStr("registry-token"))

        assert "registry-token" not in repr(rule)


@pytest.mark.parametrize("host_type", ["rubygems", "helm", "azure", "gitea", "go-mod"])
def test_accepts_unlisted_host_types(host_type: str) -> None:
    """Any lowercase host type token is accepted."""
    rule = HostRuleFactory.build(host_type=host_type)

    assert rule.to_renovate_dict()["hostType"] == host_type


@pytest.mark.parametrize("host_type", ["", "   ", "NPM", "npm registry"])
def test_rejects_malformed_host_types(host_type: str) -> None:
    """Host type must be a non-empty lowercase token."""
    with pytest.raises(ValidationError):
        HostRuleFactory.build(host_type=host_type)


@pytest.mark.parametrize("repository", ["./.", "../..", "org/..", "../repo"])
def test_rejects_dot_only_repository_segments(repository: str) -> None:
    """Owner and name cannot be made of dots only."""
    with pytest.raises(ValidationError, match="owner/name"):
        RenovateConfigFactory.build(repositories=[repository])


def test_accepts_repository_names_with_dots() -> None:
    """Dots are allowed alongside other characters."""
    config = RenovateConfigFactory.build(repositories=["org/.github", "my.org/a.b"])

    assert list(config.repositories) == ["org/.github", "my.org/a.b"]
