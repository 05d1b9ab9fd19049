from __future__ import annotations

import httpx
from azure.identity import CredentialUnavailableError

from azcli_http.cli import app, doctor


def test_doctor_module_exposes_register() -> None:
    assert callable(doctor.register)


def test_doctor_success(cli_runner, stub_cli_credential, monkeypatch) -> None:
    monkeypatch.setattr(doctor.shutil, "which", lambda name: "/usr/bin/az")

    result = cli_runner.invoke(app, ["doctor"])

    assert result.exit_code == 0, result.stdout
    assert "Azure CLI found" in result.stdout
    assert "Token acquisition successful" in result.stdout
    assert stub_cli_credential.token not in result.stdout


def test_doctor_missing_cli(cli_runner, stub_cli_credential, monkeypatch) -> None:
    monkeypatch.setattr(doctor.shutil, "which", lambda name: None)

    result = cli_runner.invoke(app, ["doctor"])

    assert result.exit_code == 1
    assert "Azure CLI not found" in result.stdout
    assert stub_cli_credential.instances == []


def test_doctor_not_logged_in(cli_runner, stub_cli_credential, monkeypatch) -> None:
    monkeypatch.setattr(doctor.shutil, "which", lambda name: "/usr/bin/az")
    stub_cli_credential.error = CredentialUnavailableError(message="not logged in")

    result = cli_runner.invoke(app, ["doctor"])

    assert result.exit_code == 1
    assert "Token acquisition failed" in result.stdout


def test_doctor_probe_reaches_api(cli_runner, stub_cli_credential, respx_mock, monkeypatch) -> None:
    monkeypatch.setattr(doctor.shutil, "which", lambda name: "/usr/bin/az")
    monkeypatch.setenv("AZHTTP_API_BASE_URL", "https://api.example.test")
    route = respx_mock.get("https://api.example.test/health").mock(return_value=httpx.Response(200, text="ok"))

    result = cli_runner.invoke(app, ["doctor", "--probe", "/health"])

    assert result.exit_code == 0, result.stdout
    assert "API reachable" in result.stdout
    assert route.called


def test_doctor_probe_failure(cli_runner, stub_cli_credential, respx_mock, monkeypatch) -> None:
    monkeypatch.setattr(doctor.shutil, "which", lambda name: "/usr/bin/az")
    monkeypatch.setenv("AZHTTP_API_BASE_URL", "https://api.example.test")
    respx_mock.get("https://api.example.test/health").mock(return_value=httpx.Response(503))

    result = cli_runner.invoke(app, ["doctor", "--probe", "/health"])

    assert result.exit_code == 1
    assert "Probe failed" in result.stdout
