import pytest

from terror.builder import Builder
from terror.core.config import Config, FeatureConfig, get_config
from terror.core.errors import TerrorError, UnknownFeatureError
from terror.core.models import Feature


class TestFeatureConfig:
    def test_defaults_disable_everything(self) -> None:
        features = FeatureConfig()

        assert features.enabled == frozenset()
        assert FeatureConfig.none() == features

    def test_all(self) -> None:
        assert FeatureConfig.all().enabled == frozenset(Feature)

    def test_from_names(self) -> None:
        features = FeatureConfig.from_names(["err_id", " MDN "])

        assert features.is_enabled(Feature.ERR_ID)
        assert features.is_enabled(Feature.MDN)
        assert not features.is_enabled(Feature.TIME)

    def test_from_names_skips_blanks(self) -> None:
        assert FeatureConfig.from_names(["", "  "]) == FeatureConfig()

    def test_unknown_feature_rejected(self) -> None:
        with pytest.raises(UnknownFeatureError) as exc_info:
            FeatureConfig.from_names(["time", "metrics"])

        assert exc_info.value.name == "metrics"
        assert isinstance(exc_info.value, TerrorError)
        assert isinstance(exc_info.value, ValueError)

    def test_is_enabled_accepts_name(self) -> None:
        assert FeatureConfig(time=True).is_enabled("time")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        features = FeatureConfig()

        with pytest.raises(AttributeError):
            features.mdn = True  # type: ignore[misc]


class TestConfig:
    def test_features_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TERROR_FEATURES", "err_id,time")

        config = Config()

        assert config.features == FeatureConfig(err_id=True, time=True)

    def test_no_features_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TERROR_FEATURES", raising=False)

        assert Config().features == FeatureConfig()

    def test_unknown_feature_in_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TERROR_FEATURES", "err_id,bogus")

        with pytest.raises(UnknownFeatureError):
            Config()

    def test_logging_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "JSON")

        config = Config()

        assert config.logging.level == "DEBUG"
        assert config.logging.format == "json"
        assert config.validate() is True

    def test_validate_rejects_bad_logging(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        monkeypatch.setenv("LOG_FORMAT", "xml")

        with pytest.raises(ValueError, match="Configuration errors"):
            Config().validate()


class TestGetConfig:
    def test_loaded_once_and_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TERROR_FEATURES", "mdn")

        first = get_config()

        assert first is get_config()
        assert first.features == FeatureConfig(mdn=True)

    def test_bad_environment_only_fails_on_use(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an invalid TERROR_FEATURES does not block explicit feature configs."""
        monkeypatch.setenv("TERROR_FEATURES", "bogus")

        built = Builder(404, "generic error", features=FeatureConfig(mdn=True)).build()

        assert built.reference_link is not None
        with pytest.raises(UnknownFeatureError):
            get_config()
        with pytest.raises(UnknownFeatureError):
            Builder(404, "generic error").build()
