import os
import sys

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from wedding_budget.config.settings import Settings, get_settings, get_project_root
from wedding_budget.engine import WeddingInput


def test_settings_defaults(tmp_path, monkeypatch):
    for var in ('WEDDING_BUDGET_LOG_LEVEL', 'WEDDING_BUDGET_API_HOST', 'WEDDING_BUDGET_API_PORT'):
        monkeypatch.delenv(var, raising=False)

    settings = Settings.load(project_root=tmp_path)

    assert settings.project_root == tmp_path
    assert settings.default_input == WeddingInput()
    assert (settings.min_guests, settings.max_guests, settings.guest_step) == (10, 500, 5)
    assert (settings.min_misc_budget, settings.max_misc_budget, settings.misc_budget_step) == (0, 100000, 500)
    assert settings.log_level == "INFO"
    assert settings.api_port == 8000


def test_settings_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv('WEDDING_BUDGET_LOG_LEVEL', 'DEBUG')
    monkeypatch.setenv('WEDDING_BUDGET_API_HOST', '127.0.0.1')
    monkeypatch.setenv('WEDDING_BUDGET_API_PORT', '9001')

    settings = Settings.load(project_root=tmp_path)

    assert settings.log_level == "DEBUG"
    assert settings.api_host == "127.0.0.1"
    assert settings.api_port == 9001


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_project_root_has_pyproject():
    assert (get_project_root() / 'pyproject.toml').exists()


def test_guest_count_hint_uses_bounds_and_step(tmp_path):
    settings = Settings(project_root=tmp_path, min_guests=20, max_guests=300, guest_step=10)
    assert settings.guest_count_hint() == "Typical guest counts run 20-300, in steps of 10"


def test_malformed_api_port_falls_back(tmp_path, monkeypatch, caplog):
    monkeypatch.setenv('WEDDING_BUDGET_API_PORT', 'eighty')

    with caplog.at_level("WARNING"):
        settings = Settings.load(project_root=tmp_path)

    assert settings.api_port == 8000
    assert "WEDDING_BUDGET_API_PORT" in caplog.text


def test_blank_api_port_uses_default(tmp_path, monkeypatch):
    monkeypatch.setenv('WEDDING_BUDGET_API_PORT', '  ')
    assert Settings.load(project_root=tmp_path).api_port == 8000
