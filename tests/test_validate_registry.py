"""Tests for the registry validator."""

import json

import pytest

from timebyzones import validate_registry
from timebyzones.validate_registry import validate


def test_shipped_registry_is_valid() -> None:
    result = validate()
    assert result["ok"] is True
    assert result["error"] is None
    assert "timezones_resolve: PASS" in result["checks"]


def test_empty_registry() -> None:
    result = validate({}, selections={})
    assert result["ok"] is False
    assert result["error"] == "Registry is empty"


def test_blank_label() -> None:
    result = validate({"  ": "UTC"}, selections={})
    assert result["ok"] is False
    assert "Blank display labels" in result["error"]


def test_selection_with_unknown_label() -> None:
    result = validate({"UTC": "UTC"}, selections={"us": ["IAD"]})
    assert result["ok"] is False
    assert "us:IAD" in result["error"]


def test_unresolvable_timezone_named() -> None:
    result = validate({"UTC": "UTC", "TEST": "Invalid/Timezone"}, selections={"default": ["UTC"]})
    assert result["ok"] is False
    assert "TEST (Invalid/Timezone)" in result["error"]
    assert result["checks"][-1].startswith("selections: PASS")


def test_main_prints_json_and_exits_zero(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.argv", ["validate_registry"])
    with pytest.raises(SystemExit) as exc:
        validate_registry.main()
    assert exc.value.code == 0
    assert json.loads(capsys.readouterr().out)["ok"] is True


def test_main_rejects_arguments(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.argv", ["validate_registry", "extra"])
    with pytest.raises(SystemExit) as exc:
        validate_registry.main()
    assert exc.value.code == 1
