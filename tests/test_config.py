"""Tests for LockrConfig and the global configuration."""

import pytest

from volume_lockr.core import ConfigMixin, LockrConfig, get_global_config, set_global_config


class TestLockrConfig:
    """Test suite for LockrConfig."""

    def test_default_initialization(self):
        config = LockrConfig()
        assert config.poll_interval == 0.1
        assert config.permissive_mode == 2
        assert config.password_preference_key == "password_protected"
        assert config.set_volume_flags == 0
        assert config.notification_min_api == 26

    def test_poll_interval_validation(self):
        with pytest.raises(ValueError):
            LockrConfig(poll_interval=0)
        with pytest.raises(ValueError):
            LockrConfig(poll_interval=-1)

    def test_preference_key_validation(self):
        with pytest.raises(ValueError):
            LockrConfig(password_preference_key="")

    def test_flags_validation(self):
        with pytest.raises(ValueError):
            LockrConfig(set_volume_flags=-1)


class TestGlobalConfig:
    """Tests for get_global_config / set_global_config and ConfigMixin."""

    @pytest.fixture(autouse=True)
    def restore_global_config(self):
        previous = get_global_config()
        yield
        set_global_config(previous)

    def test_mixin_falls_back_to_global(self):
        obj = ConfigMixin()
        new_config = LockrConfig(poll_interval=0.5)
        set_global_config(new_config)
        assert obj.config is new_config

    def test_explicit_config_wins(self):
        explicit = LockrConfig(poll_interval=0.2)
        obj = ConfigMixin(explicit)
        set_global_config(LockrConfig(poll_interval=0.5))
        assert obj.config is explicit

    def test_set_global_config_type_check(self):
        with pytest.raises(TypeError):
            set_global_config({"poll_interval": 1})
