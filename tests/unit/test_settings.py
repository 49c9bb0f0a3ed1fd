import pytest
from pydantic import ValidationError

from affilink.config.settings import DEFAULT_TRACKING_PARAMS, Settings


class TestSettingsDefaults:
    def test_default_affiliate_tag(self) -> None:
        s = Settings()
        assert s.affiliate_tag == "crystalrockma-20"

    def test_default_tracking_params(self) -> None:
        s = Settings()
        assert s.tracking_params == list(DEFAULT_TRACKING_PARAMS)
        assert "tag" in s.tracking_params
        assert "pd_rd_wg" in s.tracking_params

    def test_default_suffix_count(self) -> None:
        s = Settings()
        assert s.tracking_param_suffix_count == 10

    def test_defaults_are_not_shared(self) -> None:
        first = Settings()
        first.tracking_params.append("extra")
        assert "extra" not in Settings().tracking_params


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_affiliate_tag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AFFILIATE_TAG", "other-21")
        s = Settings()
        assert s.affiliate_tag == "other-21"

    def test_loads_tracking_params_as_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRACKING_PARAMS", '["ref", "utm_source"]')
        s = Settings()
        assert s.tracking_params == ["ref", "utm_source"]

    def test_loads_suffix_count(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRACKING_PARAM_SUFFIX_COUNT", "3")
        s = Settings()
        assert s.tracking_param_suffix_count == 3


class TestSettingsValidation:
    def test_empty_affiliate_tag_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AFFILIATE_TAG", "")
        with pytest.raises(ValidationError):
            Settings()

    def test_negative_suffix_count_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRACKING_PARAM_SUFFIX_COUNT", "-1")
        with pytest.raises(ValidationError):
            Settings()

    def test_non_numeric_suffix_count_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRACKING_PARAM_SUFFIX_COUNT", "abc")
        with pytest.raises(ValidationError):
            Settings()
