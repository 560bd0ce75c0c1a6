"""Tests for loading handler plugins from YAML config."""

from pathlib import Path

import pytest

from handlers.css_validator import CssValidatorHandler
from handlers.manager import HandlerManager
from handlers.w3c_validator import W3cValidatorHandler

CONFIG = """
validators:
  timeout: 12
handlers:
  - type: w3c_validator
    options:
      show_warnings: true
      validator_uri: http://localhost/check
  - type: css_validator
    options:
      profile: css21
  - type: no_such_handler
  - options:
      show_warnings: true
"""


def _write_config(tmp_path: Path, text: str = CONFIG) -> str:
    path = tmp_path / "config.yaml"
    path.write_text(text)
    return str(path)


def test_loads_configured_handlers(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Known handler types are instantiated with their options."""
    monkeypatch.delenv("W3C_MARKUP_VALIDATOR_URI", raising=False)
    monkeypatch.delenv("W3C_CSS_VALIDATOR_URI", raising=False)

    handlers = HandlerManager(_write_config(tmp_path)).get_handlers()

    assert [type(h) for h in handlers] == [W3cValidatorHandler, CssValidatorHandler]
    markup, css = handlers
    assert markup.show_warnings
    assert markup.validator.validator_uri == "http://localhost/check"
    assert markup.validator.timeout == 12
    assert css.validator.options["profile"] == "css21"
    assert css.validator.timeout == 12


def test_environment_overrides_validator_uri(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Endpoint environment variables win over the config file."""
    monkeypatch.setenv("W3C_MARKUP_VALIDATOR_URI", "http://validator.internal/check")
    monkeypatch.setenv("W3C_CSS_VALIDATOR_URI", "http://validator.internal/css")

    markup, css = HandlerManager(_write_config(tmp_path)).get_handlers()

    assert markup.validator.validator_uri == "http://validator.internal/check"
    assert css.validator.validator_uri == "http://validator.internal/css"


def test_unknown_handler_type_returns_none() -> None:
    """Unknown handler modules are logged and skipped."""
    manager = HandlerManager("/nonexistent/config.yaml")

    assert manager.get_handler_by_type("no_such_handler") is None


def test_missing_config_file_means_no_handlers(tmp_path: Path) -> None:
    """Without a config file there is nothing to run."""
    manager = HandlerManager(str(tmp_path / "missing.yaml"))

    assert manager.get_handlers() == []
    assert manager.config == {}


def test_empty_config_file_means_no_handlers(tmp_path: Path) -> None:
    """An empty YAML document loads as no handlers."""
    manager = HandlerManager(_write_config(tmp_path, ""))

    assert manager.get_handlers() == []


def test_relative_config_path_resolves_against_project(monkeypatch: pytest.MonkeyPatch) -> None:
    """The bundled config.yaml is found from any working directory."""
    monkeypatch.delenv("W3C_MARKUP_VALIDATOR_URI", raising=False)
    monkeypatch.delenv("W3C_CSS_VALIDATOR_URI", raising=False)
    monkeypatch.chdir("/")

    manager = HandlerManager()

    assert Path(manager.config_path).name == "config.yaml"
    assert [h.name for h in manager.get_handlers()] == ["w3c_validator", "css_validator"]


ENDPOINT_CONFIG = """
validators:
  markup_uri: http://local/check
  css_uri: http://local/css
handlers:
  - type: w3c_validator
  - type: css_validator
  - type: w3c_validator
    options:
      validator_uri: http://pinned/check
"""


def test_validators_section_sets_endpoints(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Endpoints under validators: apply unless a handler names its own."""
    monkeypatch.delenv("W3C_MARKUP_VALIDATOR_URI", raising=False)
    monkeypatch.delenv("W3C_CSS_VALIDATOR_URI", raising=False)

    manager = HandlerManager(_write_config(tmp_path, ENDPOINT_CONFIG))
    markup, css, pinned = manager.get_handlers()

    assert markup.validator.validator_uri == "http://local/check"
    assert css.validator.validator_uri == "http://local/css"
    assert pinned.validator.validator_uri == "http://pinned/check"
    assert manager.get_validator_uri("w3c_validator") == "http://local/check"
    assert manager.get_validator_uri("css_validator") == "http://local/css"


def test_environment_wins_over_validators_section(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """The endpoint environment variable overrides every config value."""
    monkeypatch.setenv("W3C_MARKUP_VALIDATOR_URI", "http://env/check")
    monkeypatch.delenv("W3C_CSS_VALIDATOR_URI", raising=False)

    manager = HandlerManager(_write_config(tmp_path, ENDPOINT_CONFIG))
    markup, css, pinned = manager.get_handlers()

    assert markup.validator.validator_uri == "http://env/check"
    assert pinned.validator.validator_uri == "http://env/check"
    assert css.validator.validator_uri == "http://local/css"
    assert manager.get_validator_uri("w3c_validator") == "http://env/check"


def test_validator_uri_and_timeout_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Without endpoints or timeout the client defaults apply."""
    monkeypatch.delenv("W3C_MARKUP_VALIDATOR_URI", raising=False)

    manager = HandlerManager(_write_config(tmp_path, "handlers: []\n"))

    assert manager.get_validator_uri("w3c_validator") is None
    assert manager.get_validator_uri("no_such_handler") is None
    assert manager.get_validator_timeout() == 30
