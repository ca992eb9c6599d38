"""Tests for the finchat command line interface."""
import httpx
import pytest
import yaml
from rich.console import Console
from typer.testing import CliRunner

from finchat.cli import app as app_module
from finchat.cli.app import app
from finchat.llm import GeminiProvider

runner = CliRunner()


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Keep Rich from wrapping long lines in captured output."""
    monkeypatch.setattr(app_module, "console", Console(width=300))


@pytest.fixture
def ledger_path(tmp_path, ledger):
    path = tmp_path / "ledger.yaml"
    path.write_text(yaml.safe_dump(ledger.model_dump(mode="json")))
    return path


def mock_llm(status_code=200, body=None, text=None):
    def handler(request):
        if text is not None:
            return httpx.Response(status_code, text=text)
        return httpx.Response(status_code, json=body)

    def factory(console=None):
        return GeminiProvider(api_key="fake-key", transport=httpx.MockTransport(handler))

    return factory


class TestModelsCommand:
    """Tests for `finchat models`."""

    def test_lists_models_and_default(self, monkeypatch):
        monkeypatch.setenv("GEMINI_DEFAULT_MODEL", "gemini-2.5-flash")

        result = runner.invoke(app, ["models"])

        assert result.exit_code == 0
        assert "gemini-2.5-pro" in result.output
        assert "gemini-1.5-pro" in result.output
        assert "not supported" not in result.output

    def test_warns_on_unsupported_default(self, monkeypatch):
        monkeypatch.setenv("GEMINI_DEFAULT_MODEL", "gemini-0.1")

        result = runner.invoke(app, ["models"])

        assert result.exit_code == 0
        assert "gemini-0.1 is not supported" in result.output


class TestSnapshotCommand:
    """Tests for `finchat snapshot`."""

    def test_prints_snapshot_lines(self, ledger_path):
        result = runner.invoke(app, ["snapshot", str(ledger_path)])

        assert result.exit_code == 0
        assert "- Net worth: $12,000.00 | Assets: $15,000.00 | Liabilities: $3,000.00" in result.output
        assert "Current Month: Income $5,000.00, Expenses $3,200.00" in result.output
        assert "Median monthly income (salary proxy): $4,800.00" in result.output

    def test_invalid_ledger_exits(self, tmp_path):
        path = tmp_path / "ledger.yaml"
        path.write_text("transactions: []\n")

        result = runner.invoke(app, ["snapshot", str(path)])

        assert result.exit_code == 1
        assert "cannot load ledger" in result.output

    def test_missing_ledger_rejected(self, tmp_path):
        result = runner.invoke(app, ["snapshot", str(tmp_path / "missing.yaml")])
        assert result.exit_code != 0


class TestInstructionsCommand:
    """Tests for `finchat instructions`."""

    def test_prints_rendered_instructions(self, ledger_path):
        result = runner.invoke(app, ["instructions", str(ledger_path)])

        assert result.exit_code == 0
        assert "User name: Alex" in result.output
        assert "ISO code: USD" in result.output
        assert "Functions: get_transactions, get_accounts, get_balance_sheet, get_income_statement" in result.output


class TestChatCommand:
    """Tests for `finchat chat`."""

    def test_missing_api_key_exits(self, ledger_path, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)

        result = runner.invoke(app, ["chat", str(ledger_path), "How am I doing?"])

        assert result.exit_code == 1
        assert "GEMINI_API_KEY not set" in result.output

    def test_prints_reply(self, ledger_path, monkeypatch):
        body = {"candidates": [{"content": {"parts": [{"text": "Net worth is up."}]}}]}
        monkeypatch.setattr(app_module, "require_llm", mock_llm(body=body))

        result = runner.invoke(app, ["chat", str(ledger_path), "How am I doing?", "--model", "gemini-2.5-flash"])

        assert result.exit_code == 0
        assert "Net worth is up." in result.output
        assert "gemini-2.5-flash" in result.output

    def test_streamed_reply(self, ledger_path, monkeypatch):
        monkeypatch.delenv("GEMINI_DEFAULT_MODEL", raising=False)
        body = {"candidates": [{"content": {"parts": [{"text": "Streamed answer"}]}}]}
        monkeypatch.setattr(app_module, "require_llm", mock_llm(body=body))

        result = runner.invoke(app, ["chat", str(ledger_path), "Hi", "--stream"])

        assert result.exit_code == 0
        assert "Streamed answer" in result.output

    def test_provider_error_reported(self, ledger_path, monkeypatch):
        monkeypatch.delenv("GEMINI_DEFAULT_MODEL", raising=False)
        monkeypatch.setattr(app_module, "require_llm", mock_llm(status_code=503, text="[overloaded]"))

        result = runner.invoke(app, ["chat", str(ledger_path), "Hi"])

        assert result.exit_code == 1
        assert "Assistant unavailable: Gemini API error" in result.output
        assert "[overloaded]" in result.output
