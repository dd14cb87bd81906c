"""Tests for the API endpoints and option loading."""

import json

import pytest
import requests
import yaml
from log_config import DEFAULT_LOG_LEVEL, setup_logging


class TestConvertEndpoints:
    """Case conversion endpoints."""

    def test_convert_json_keys(self, client, settings):
        body = (
            '{"jsonrpc":"2.0","id":1,"error":'
            '{"code":10,"message":"VOLUMES_EXIST_ON_SET","want_camel":1}}'
        )
        response = client.post("/api/convert/camel", content=body)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.text == (
            '{"Error":{"Code":10,"Message":"VOLUMES_EXIST_ON_SET","WantCamel":1},'
            '"Id":1,"JSONrpc":"2.0"}'
        )

    def test_convert_json_keys_rejects_array(self, client, settings):
        response = client.post("/api/convert/camel", content='[{"a_b": 1}]')

        assert response.status_code == 400
        assert "Expected a JSON object" in response.json()["detail"]

    def test_convert_json_keys_rejects_invalid_json(self, client, settings):
        response = client.post("/api/convert/camel", content="{not json")
        assert response.status_code == 400

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_convert_json_keys_rejects_non_finite(self, client, settings, constant):
        response = client.post(
            "/api/convert/camel", content=f'{{"some_value": {constant}}}'
        )

        assert response.status_code == 400
        assert "not valid JSON" in response.json()["detail"]

    def test_configured_abbreviations(self, client, settings):
        settings.update(abbreviations=["ID"])
        response = client.post("/api/convert/camel", content='{"volume_id":"v1"}')
        assert response.json() == {"VolumeID": "v1"}

    def test_camel_word(self, client, settings):
        response = client.get("/api/convert/camel-word", params={"word": "http_status"})
        assert response.json() == {"word": "HTTPStatus"}

    def test_underscore_word(self, client):
        response = client.get(
            "/api/convert/underscore", params={"word": "SingleEndC", "lower": "true"}
        )
        assert response.json() == {"word": "single_end_c"}

        response = client.get("/api/convert/underscore", params={"word": "CamelCase"})
        assert response.json() == {"word": "Camel_Case"}


class TestIdentityAndChecksums:
    def test_whoami_basic(self, client):
        request = requests.Request(
            "GET", "http://testserver/api/whoami", auth=("testUser", "password")
        ).prepare()
        response = client.get(
            "/api/whoami", headers={"Authorization": request.headers["Authorization"]}
        )
        assert response.json() == {"username": "testUser"}

    def test_whoami_anonymous(self, client):
        assert client.get("/api/whoami").json() == {"username": ""}

    def test_checksum_default_algorithm(self, client, settings):
        response = client.post(
            "/api/checksum", content=b"admin:Western Digital Corporation:admin"
        )
        assert response.json() == {
            "algorithm": "md5",
            "checksum": "l+uthS0Nq/1rca4m//Yfow==",
        }

    def test_checksum_sha1(self, client, settings):
        response = client.post(
            "/api/checksum", params={"algorithm": "SHA1"}, content=b"admin"
        )
        assert response.json()["checksum"] == "0DPiKuNIrrVmD8IUCuw1hQxNqZc="

    def test_checksum_unknown_algorithm(self, client, settings):
        response = client.post("/api/checksum", params={"algorithm": "crc32"}, content=b"x")
        assert response.status_code == 400


class TestSettings:
    def test_get_settings_camel_case(self, client, settings):
        response = client.get("/api/settings")

        assert response.json() == {
            "Abbreviations": ["JSON", "NQN", "HTTP"],
            "BytesPerLine": 16,
            "UniqueNumberFormat": "%s_%03d",
            "ChecksumAlgorithm": "md5",
        }

    def test_update_ignores_unknown_keys(self, settings):
        settings.update(bytes_per_line=8, not_a_setting=True)
        assert settings.bytes_per_line == 8
        assert not hasattr(settings, "not_a_setting")


class TestLoadOptions:
    def test_options_json(self, app_module, tmp_path, monkeypatch):
        options_file = tmp_path / "options.json"
        options_file.write_text(json.dumps({"bytes_per_line": 4}))
        monkeypatch.setenv("HELPERS_OPTIONS", str(options_file))

        assert app_module.load_options() == {"bytes_per_line": 4}

    def test_config_yaml_options_section(self, app_module, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            yaml.safe_dump({"name": "helpers", "options": {"checksum_algorithm": "sha1"}})
        )
        monkeypatch.delenv("HELPERS_OPTIONS", raising=False)
        monkeypatch.setattr(app_module, "CONFIG_YAML", str(config_file))

        options = app_module.load_options()
        assert options == {"checksum_algorithm": "sha1"}
        assert app_module.create_settings(options).checksum_algorithm == "sha1"

    def test_invalid_options_json_falls_back(self, app_module, tmp_path, monkeypatch):
        options_file = tmp_path / "options.json"
        options_file.write_text("{broken")
        monkeypatch.setenv("HELPERS_OPTIONS", str(options_file))
        monkeypatch.setattr(app_module, "CONFIG_YAML", str(tmp_path / "missing.yaml"))

        assert app_module.load_options() == {}


class TestEnvironment:
    def test_log_level_from_env_file(self, app_module, tmp_path, monkeypatch):
        """LOG_LEVEL in the .env file is applied when logging is configured."""
        env_file = tmp_path / ".env"
        env_file.write_text("LOG_LEVEL=warning\n")
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        try:
            assert app_module.load_environment(str(env_file)) == "WARNING"
        finally:
            setup_logging(DEFAULT_LOG_LEVEL)

    def test_process_environment_wins(self, app_module, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("LOG_LEVEL=warning\n")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        try:
            assert app_module.load_environment(str(env_file)) == "DEBUG"
        finally:
            setup_logging(DEFAULT_LOG_LEVEL)
