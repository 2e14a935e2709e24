"""
Tests for the command line entry point.
"""

import io
import logging

import pytest

import main
from settings import build_machine, load_settings

YAML_DOC = """\
wheels:
  - {name: I, position: 0}
  - {name: II, position: 0}
  - {name: III, position: 0}
  - {name: Reflector B}
"""


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(YAML_DOC, encoding="utf-8")
    return path


def fresh(path):
    return build_machine(load_settings(path))


class TestLineLoop:

    def test_stdin_lines_in_order(self, settings_file, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("hello, world\nAAA\n\nzz top\n"))
        main.main(["-s", str(settings_file)])
        out = capsys.readouterr().out.splitlines()

        ref = fresh(settings_file)
        assert out[0] == "Wheel position: AAA"
        assert out[1:] == [ref.encrypt(line) for line in ["hello, world", "AAA", "", "zz top"]]

    def test_one_shot_message(self, settings_file, capsys):
        main.main(["-s", str(settings_file), "-m", "a", "--no-positions"])
        assert capsys.readouterr().out == "S\n"

    def test_key_override(self, settings_file, capsys):
        main.main(["-s", str(settings_file), "-k", "QEV", "-m", "x"])
        assert capsys.readouterr().out.splitlines()[0] == "Wheel position: QEV"

    def test_blocks(self, settings_file, capsys):
        main.main(["-s", str(settings_file), "--no-positions", "--block", "5", "-m", "A" * 12])
        groups = capsys.readouterr().out.strip().split(" ")
        assert [len(g) for g in groups] == [5, 5, 2]


class TestFailures:

    def test_missing_settings_exits(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main.main(["-s", str(tmp_path / "missing.yaml"), "-m", "A"])
        assert "Failed to load settings" in str(exc.value.code)

    def test_unknown_rotor_exits(self, tmp_path):
        path = tmp_path / "s.yaml"
        path.write_text("wheels:\n  - {name: XX}\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main.main(["-s", str(path), "-m", "A"])
        assert "XX" in str(exc.value.code)

    def test_undecodable_settings_exits(self, tmp_path):
        path = tmp_path / "s.yaml"
        path.write_bytes(b"wheels:\n  - {name: \xff}\n")
        with pytest.raises(SystemExit) as exc:
            main.main(["-s", str(path), "-m", "A"])
        assert "Failed to load settings" in str(exc.value.code)

    def test_bad_key_exits(self, settings_file):
        with pytest.raises(SystemExit):
            main.main(["-s", str(settings_file), "-k", "AB", "-m", "A"])

    def test_settings_required(self):
        with pytest.raises(SystemExit):
            main.main([])


class TestVerbose:

    def test_routing_is_logged(self, settings_file, caplog, capsys):
        caplog.set_level(logging.DEBUG, logger="ENIGMA")
        main.main(["-s", str(settings_file), "-m", "A", "-v", "routing"])
        assert "[ROUTING] A->A->G->B->V->W->X->W->S->S" in caplog.text

    def test_components_off_by_default(self, settings_file, caplog, capsys):
        caplog.set_level(logging.DEBUG, logger="ENIGMA")
        main.main(["-s", str(settings_file), "-m", "A"])
        assert "[ROUTING]" not in caplog.text


def test_format_blocks():
    assert main.format_blocks("ABCDEFG", 3) == "ABC DEF G"
    assert main.format_blocks("ABC", 0) == "ABC"
