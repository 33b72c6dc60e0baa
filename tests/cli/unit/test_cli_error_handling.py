"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from fluent_matchers.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["check", "--actual", "/tmp/actual.yaml"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--expectations" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["check", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_check_document_returns_error_message(tmp_path: Path, capsys) -> None:
    exit_code = main(["check", "--expectations", str(tmp_path / "missing.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Check document not found" in captured.err
    assert "Traceback" not in captured.err


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "check.yaml"
    output_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Check document already exists" in captured.err
    assert output_path.read_text(encoding="utf-8") == "existing"


def test_actual_items_of_wrong_type_return_error_message(tmp_path: Path, capsys) -> None:
    check_path = tmp_path / "check.yaml"
    check_path.write_text(
        "expectations:\n  item_type: int\n  sorted: true\nactual: [1, a]\n",
        encoding="utf-8",
    )

    exit_code = main(["check", "--expectations", str(check_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "actual[1] 'a' is not of item_type 'int'." in captured.err
    assert "Traceback" not in captured.err
