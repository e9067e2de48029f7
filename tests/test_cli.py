"""Tests for the siteforge command-line interface."""

from types import SimpleNamespace

from typer.testing import CliRunner

from siteforge.cli import app
from siteforge.payments import expected_signature

runner = CliRunner()


def test_sign_prints_gateway_signature():
    result = runner.invoke(app, ["sign", "o1", "p1", "--secret", "s"])
    assert result.exit_code == 0
    assert result.output.strip() == expected_signature("o1", "p1", "s")


def test_sign_without_secret_fails(monkeypatch):
    monkeypatch.setattr("siteforge.cli.get_settings", lambda: SimpleNamespace(razorpay_key_secret=""))
    result = runner.invoke(app, ["sign", "o1", "p1"])
    assert result.exit_code == 1


def test_variants_lists_the_plan():
    result = runner.invoke(app, ["variants"])
    assert result.exit_code == 0
    assert "Earthy" in result.output
    assert "Futuristic" in result.output
