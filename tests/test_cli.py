"""
Тесты командной строки
"""

import json
import sys

import httpx
import pytest

from proxy_generator import cli
from proxy_generator.config import ProxyGeneratorConfig
from proxy_generator.internal.source import read_proxy_config


@pytest.fixture
def api_file(tmp_path, api_definition):
    api_definition["modules"]["identity"] = {
        "rootPath": "identity",
        "remoteServiceName": "AbpIdentity",
        "controllers": {},
    }
    path = tmp_path / "api.json"
    path.write_text(json.dumps(api_definition), encoding="utf-8")
    return str(path)


def make_config(api_file, tmp_path, modules=None):
    return ProxyGeneratorConfig(
        url=api_file,
        target=str(tmp_path / "src"),
        solution="Acme.Shop",
        modules=modules or ["app"],
    )


class TestFetchApiDefinition:
    """Тесты загрузки описания API"""

    def test_local_file(self, api_file):
        assert "app" in cli.fetch_api_definition(api_file)["modules"]

    def test_remote_url(self, monkeypatch):
        """Тест запроса к бэкенду (схема добавляется автоматически)"""
        calls = []

        def fake_get(url):
            calls.append(url)
            return httpx.Response(
                200, json={"modules": {}}, request=httpx.Request("GET", url)
            )

        monkeypatch.setattr(cli.httpx, "get", fake_get)

        result = cli.fetch_api_definition("localhost:44300/")

        assert result == {"modules": {}}
        assert calls == ["https://localhost:44300/api/abp/api-definition?includeTypes=true"]

    def test_remote_error(self, monkeypatch):
        def fake_get(url):
            return httpx.Response(500, request=httpx.Request("GET", url))

        monkeypatch.setattr(cli.httpx, "get", fake_get)

        with pytest.raises(httpx.HTTPStatusError):
            cli.fetch_api_definition("http://localhost:44300")


class TestRunGeneration:
    """Тесты генерации с записью на диск"""

    def test_files_written(self, api_file, tmp_path):
        cli.run_generation(make_config(api_file, tmp_path))

        proxy = tmp_path / "src" / "proxy"
        assert (proxy / "users" / "user.service.ts").exists()
        assert (proxy / "users" / "use-user-service.ts").exists()
        assert (proxy / "users" / "models.ts").exists()
        assert (proxy / "users" / "user-status.enum.ts").exists()
        assert (proxy / "shared" / "models.ts").exists()
        assert (proxy / "README.md").exists()
        assert read_proxy_config(str(tmp_path / "src")).generated == ["app"]

    def test_refresh_all(self, api_file, tmp_path):
        """Тест: --all добавляет ранее сгенерированные модули"""
        cli.run_generation(make_config(api_file, tmp_path, ["identity"]))
        cli.run_generation(make_config(api_file, tmp_path), refresh_all=True)

        assert read_proxy_config(str(tmp_path / "src")).generated == ["app", "identity"]

    def test_clear(self, api_file, tmp_path):
        stale = tmp_path / "src" / "proxy" / "old"
        stale.mkdir(parents=True)
        (stale / "old.service.ts").write_text("x")

        cli.run_generation(make_config(api_file, tmp_path), clear=True)

        assert not stale.exists()
        assert (tmp_path / "src" / "proxy" / "users" / "models.ts").exists()

    def test_failed_module_not_registered(self, api_file, tmp_path):
        with pytest.raises(cli.ProxyGeneratorError):
            cli.run_generation(make_config(api_file, tmp_path, ["app", "missing"]))

        assert read_proxy_config(str(tmp_path / "src")).generated == ["app"]


class TestGenerateCommand:
    """Тесты команды proxy-generator"""

    def test_missing_url(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(sys, "argv", ["proxy-generator"])

        with pytest.raises(SystemExit) as exc_info:
            cli.generate()

        assert exc_info.value.code == 1

    def test_init_config(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(
            sys,
            "argv",
            ["proxy-generator", "--init-config", "--url", "http://localhost:44300"],
        )

        cli.generate()

        config = ProxyGeneratorConfig.from_file(str(tmp_path / "proxy.toml"))
        assert config.url == "http://localhost:44300"
        assert config.modules == ["app"]

    def test_generation_error(self, monkeypatch, tmp_path, api_file):
        """Тест: ошибка генерации завершает процесс с кодом 1"""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(
            sys,
            "argv",
            ["proxy-generator", "--url", api_file, "--module", "missing"],
        )

        with pytest.raises(SystemExit) as exc_info:
            cli.generate()

        assert exc_info.value.code == 1

    def test_generate_from_args(self, monkeypatch, tmp_path, api_file):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(
            sys,
            "argv",
            [
                "proxy-generator",
                "--url",
                api_file,
                "--solution",
                "Acme.Shop",
                "--target",
                "web",
            ],
        )

        cli.generate()

        assert (tmp_path / "web" / "proxy" / "users" / "user.service.ts").exists()
