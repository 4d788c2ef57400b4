"""Tests for config: defaults, env flags, namespace overrides."""

import pytest

from webcmd.core.config import DEFAULT_NAMESPACES, Config, env_flag, load_config

ENV_VARS = (
    "WEBCMD_NAMESPACES",
    "WEBCMD_APP",
    "WEBCMD_NO_DETECT",
    "WEBCMD_HELP",
    "WEBCMD_APP_LOADER",
    "WEBCMD_HARNESS_ACTIVE",
    "WEBCMD_QUIET",
    "WEBCMD_VERBOSE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


class TestConfigDefaults:
    def test_default_namespaces(self):
        assert Config().namespaces == list(DEFAULT_NAMESPACES)

    def test_flags_off(self):
        c = Config()
        assert not (c.no_detect or c.force_help or c.app_loader or c.harness_active or c.quiet)

    def test_cwd_unset(self):
        assert Config().cwd is None
        assert load_config().cwd is None

    def test_namespaces_not_shared(self):
        a, b = Config(), Config()
        a.namespaces.append("x")
        assert b.namespaces == list(DEFAULT_NAMESPACES)


class TestEnvFlag:
    @pytest.mark.parametrize("value", ["1", "true", "yes", "on", "anything"])
    def test_true(self, clean_env, value):
        clean_env.setenv("WEBCMD_TEST_FLAG", value)
        assert env_flag("WEBCMD_TEST_FLAG") is True

    @pytest.mark.parametrize("value", ["", "0", "false", "No", "OFF"])
    def test_false(self, clean_env, value):
        clean_env.setenv("WEBCMD_TEST_FLAG", value)
        assert env_flag("WEBCMD_TEST_FLAG") is False

    def test_unset(self):
        assert env_flag("WEBCMD_TEST_FLAG_UNSET") is False


class TestLoadConfig:
    def test_defaults(self):
        config = load_config()
        assert config.namespaces == list(DEFAULT_NAMESPACES)
        assert config.app is None

    def test_env_namespaces(self, clean_env):
        clean_env.setenv("WEBCMD_NAMESPACES", "myapp.commands, webcmd.commands.builtin,")
        assert load_config().namespaces == ["myapp.commands", "webcmd.commands.builtin"]

    def test_arg_namespaces_win(self, clean_env):
        clean_env.setenv("WEBCMD_NAMESPACES", "from_env")
        assert load_config(namespaces=["from_arg"]).namespaces == ["from_arg"]

    def test_flags(self, clean_env):
        for var in ENV_VARS[2:]:
            clean_env.setenv(var, "1")
        config = load_config()
        assert config.no_detect
        assert config.force_help
        assert config.app_loader
        assert config.harness_active
        assert config.quiet
        assert config.verbose

    def test_app(self, clean_env):
        clean_env.setenv("WEBCMD_APP", "shop.app:app")
        assert load_config().app == "shop.app:app"

    def test_verbose_arg(self):
        assert load_config(verbose=True).verbose is True
