"""설정 로딩 테스트"""

from liferpg.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for key in (
            "LOG_LEVEL",
            "STATE_PATH",
            "TIMEZONE",
            "DEFAULT_WINDOW_DAYS",
            "DYNAMIC_TDEE_WINDOW_DAYS",
        ):
            monkeypatch.delenv(key, raising=False)
        config = Settings(_env_file=None)
        assert config.LOG_LEVEL == "INFO"
        assert config.TIMEZONE == "UTC"
        assert config.DEFAULT_WINDOW_DAYS == 30
        assert config.DYNAMIC_TDEE_WINDOW_DAYS == 14

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_WINDOW_DAYS", "7")
        monkeypatch.setenv("STATE_PATH", "/tmp/liferpg.json")
        config = Settings(_env_file=None)
        assert config.DEFAULT_WINDOW_DAYS == 7
        assert config.STATE_PATH == "/tmp/liferpg.json"
