from __future__ import annotations

from pathlib import Path

from sheetlens.cli import main as cli_main
from sheetlens.config.loader import load_workspace


def test_cli_list_workspace(write_workspace: Path, capsys):
    code = cli_main(["--list"])
    out = capsys.readouterr().out
    assert code == 0
    assert "PROJECT 1: Demo" in out
    assert "SHEET 10: People cols=3 rows=3" in out
    assert "SCREEN 101: People cards type=cards sheet=10" in out
    assert "RULE 1000: Senior [on] highlight Age greater_than 20" in out
    assert "RULE 1001: Missing @ [off] validation Email contains @" in out


def test_cli_defaults_to_list(write_workspace: Path, capsys):
    assert cli_main([]) == 0
    assert "SCREEN 100:" in capsys.readouterr().out


def test_cli_render_table_screen(write_workspace: Path, capsys):
    code = cli_main(["--screen", "100"])
    out = capsys.readouterr().out
    assert code == 0
    assert "People table [table]" in out
    assert "People · 3 rows" in out
    assert "Active rules: Senior" in out
    assert "30 *#ef4444" in out
    assert "SUMMARY screen=100 type=table rows=3 shown=3 active_rules=1" in out


def test_cli_search_and_sort(write_workspace: Path, capsys):
    cli_main(["--screen", "100", "--search", "ANN"])
    out = capsys.readouterr().out
    assert "People · 1 rows" in out
    assert "Bob" not in out

    cli_main(["--screen", "100", "--sort", "Age"])
    out = capsys.readouterr().out
    assert out.index("Bob") < out.index("Ann") < out.index("Cid")
    assert "Age ^" in out

    cli_main(["--screen", "100", "--sort", "Age", "--sort", "Age"])
    out = capsys.readouterr().out
    assert out.index("Cid") < out.index("Ann") < out.index("Bob")
    assert "Age v" in out


def test_cli_unknown_screen(write_workspace: Path, capsys):
    code = cli_main(["--screen", "999"])
    assert code == 1
    assert "ERROR screen not found: 999" in capsys.readouterr().out


def test_cli_toggle_rule_persists(write_workspace: Path, capsys):
    code = cli_main(["--toggle-rule", "1001"])
    out = capsys.readouterr().out
    assert code == 0
    assert "INFO rule 1001 (Missing @) active=true" in out

    store = load_workspace(write_workspace)
    assert store.get_rule(1001).active is True
    assert store.get_rule(1000).active is True
    assert [r.id for r in store.list_rules()] == [1000, 1001]

    cli_main(["--screen", "100"])
    assert "Active rules: Senior, Missing @" in capsys.readouterr().out


def test_cli_debug_mode(write_workspace: Path, capsys):
    cli_main(["--debug", "--screen", "102"])
    out = capsys.readouterr().out
    assert "DEBUG debug mode enabled" in out
    assert "DEBUG screen=102 type=list rows=3 shown=3" in out


def test_cli_workspace_option(temp_workdir: Path, sample_workspace_yaml: str, capsys):
    alt = temp_workdir / "alt.yml"
    alt.write_text(sample_workspace_yaml, encoding="utf-8")
    assert cli_main(["--workspace", str(alt), "--screen", "101"]) == 0
    assert "People cards [cards]" in capsys.readouterr().out
