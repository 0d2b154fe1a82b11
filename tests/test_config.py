import pytest

from stripe_payments.api import create_client
from stripe_payments.core.config import (
    DEFAULT_API_BASE,
    ConfigError,
    StripeConfig,
    load_stripe_config,
)
from stripe_payments.core.environment import build_environment, load_env_file


def test_defaults_from_mapping():
    config = StripeConfig.from_mapping({"STRIPE_API_KEY": " sk_test_abc "})
    assert config.api_key == "sk_test_abc"
    assert config.api_base == DEFAULT_API_BASE
    assert config.timeout_seconds == 30
    assert config.api_version is None


def test_missing_api_key():
    with pytest.raises(ConfigError, match="STRIPE_API_KEY"):
        StripeConfig.from_mapping({})


def test_blank_api_key():
    with pytest.raises(ConfigError, match="must not be empty"):
        StripeConfig.from_mapping({"STRIPE_API_KEY": "  "})


@pytest.mark.parametrize("timeout", ["soon", "0", "-5"])
def test_invalid_timeout(timeout):
    with pytest.raises(ConfigError, match="STRIPE_TIMEOUT_SECONDS"):
        StripeConfig.from_mapping(
            {"STRIPE_API_KEY": "sk_test_abc", "STRIPE_TIMEOUT_SECONDS": timeout}
        )


def test_api_base_must_be_http():
    with pytest.raises(ConfigError, match="STRIPE_API_BASE"):
        StripeConfig.from_mapping(
            {"STRIPE_API_KEY": "sk_test_abc", "STRIPE_API_BASE": "api.stripe.com"}
        )


def test_api_base_trailing_slash_is_dropped():
    config = StripeConfig.from_mapping(
        {"STRIPE_API_KEY": "sk_test_abc", "STRIPE_API_BASE": "http://localhost:12111/v1/"}
    )
    assert config.url("/charges") == "http://localhost:12111/v1/charges"


def test_repr_hides_the_key():
    config = StripeConfig(api_key="sk_test_supersecretvalue")
    assert "supersecretvalue" not in repr(config)


def test_keyword_arguments_win_over_environment(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("STRIPE_API_KEY=sk_from_file\nSTRIPE_TIMEOUT_SECONDS=5\n")

    config = load_stripe_config(
        env_file=str(env_file),
        base={"STRIPE_API_KEY": "sk_from_env"},
        overrides={"STRIPE_API_VERSION": "2014-01-31"},
        timeout_seconds=12,
    )

    assert config.api_key == "sk_from_env"
    assert config.timeout_seconds == 12
    assert config.api_version == "2014-01-31"


def test_env_file_parsing(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\n"
        "export STRIPE_API_KEY='sk_quoted'\n"
        'STRIPE_API_VERSION="2014-01-31"\n'
        "not a pair\n"
    )
    environment = build_environment(env_file=str(env_file), base={})
    assert environment.get("STRIPE_API_KEY") == "sk_quoted"
    assert environment.get("STRIPE_API_VERSION") == "2014-01-31"
    assert environment.get("not a pair") is None


def test_missing_env_file_is_ignored(tmp_path):
    environment = build_environment(env_file=str(tmp_path / "absent.env"), base={"A": "1"})
    assert dict(environment.variables) == {"A": "1"}


def test_load_env_file_keeps_existing_keys(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("STRIPE_API_KEY=sk_file\nSTRIPE_API_BASE=http://localhost\n")
    target = {"STRIPE_API_KEY": "sk_existing"}

    merged = load_env_file(str(env_file), environ=target)

    assert merged["STRIPE_API_KEY"] == "sk_existing"
    assert target["STRIPE_API_BASE"] == "http://localhost"


def test_create_client_rejects_config_and_settings():
    with pytest.raises(ValueError):
        create_client(config=StripeConfig(api_key="sk_test_abc"), api_key="sk_other")


def test_create_client_from_settings():
    client = create_client(env_file=None, base={}, api_key="sk_test_abc")
    assert client.config.api_key == "sk_test_abc"
