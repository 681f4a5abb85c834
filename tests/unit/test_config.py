# tests/unit/test_config.py
"""
Unit tests for configuration loading precedence.
"""

from src.meetpulse.config import ConfigLoader


def write(path, text):
    path.write_text(text)
    return path


class TestConfigLoader:

    def test_defaults_without_files(self, tmp_path, monkeypatch):
        for var in ("DATABASE_TYPE", "SQLITE_DB_PATH", "PORT", "MEETPULSE_API_PORT"):
            monkeypatch.delenv(var, raising=False)
        monkeypatch.setenv("MEETPULSE_ENV", "development")

        config = ConfigLoader(str(tmp_path)).get()

        assert config.database_type == "supabase"
        assert config.api_port == 4000
        assert config.environment == "development"

    def test_env_file_overrides_default(self, tmp_path, monkeypatch):
        monkeypatch.delenv("DATABASE_TYPE", raising=False)
        monkeypatch.setenv("MEETPULSE_ENV", "staging")
        write(tmp_path / "default.yaml", "database_type: supabase\nlog_level: INFO\n")
        write(tmp_path / "staging.yaml", "database_type: sqlite\n")

        config = ConfigLoader(str(tmp_path)).get()

        assert config.database_type == "sqlite"
        assert config.log_level == "INFO"

    def test_environment_variables_win(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MEETPULSE_ENV", "staging")
        monkeypatch.setenv("DATABASE_TYPE", "supabase")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("OPENAI_MODEL", "gpt-4o")
        write(tmp_path / "staging.yaml", "database_type: sqlite\napi_port: 9000\n")

        config = ConfigLoader(str(tmp_path)).get()

        assert config.database_type == "supabase"
        assert config.api_port == 8080
        assert config.openai_model == "gpt-4o"

    def test_malformed_yaml_ignored(self, tmp_path, monkeypatch):
        monkeypatch.delenv("DATABASE_TYPE", raising=False)
        monkeypatch.setenv("MEETPULSE_ENV", "development")
        write(tmp_path / "default.yaml", "database_type: [unclosed\n")

        config = ConfigLoader(str(tmp_path)).get()

        assert config.database_type == "supabase"
