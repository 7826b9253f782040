"""Command-line entry point tests."""

from __future__ import annotations

import main


class TestMain:
    def test_translates_arguments(self, capsys) -> None:
        assert main.main(["921.015", "-0.005"]) == 0
        out = capsys.readouterr().out
        assert "Nine Hundred Twenty-One Dollars And Two Cents" in out
        assert "Negative One Cent" in out

    def test_failure_sets_exit_code(self, capsys) -> None:
        assert main.main(["1", "1,000"]) == 1
        out = capsys.readouterr().out
        assert "One Dollar" in out
        assert "INVALID_AMOUNT" in out

    def test_demo_table_without_arguments(self, capsys) -> None:
        assert main.main([]) == 0
        out = capsys.readouterr().out
        assert "One Hundred Cents" in out
        assert f"{len(main.SAMPLE_AMOUNTS)} amount(s) translated" in out

    def test_reads_amounts_file(self, tmp_path, capsys) -> None:
        amounts = tmp_path / "amounts.txt"
        amounts.write_text("# invoice totals\n1099.015\n\n2\n", encoding="utf-8")
        assert main.read_amounts_file(str(amounts)) == ["1099.015", "2"]
        assert main.main(["--file", str(amounts)]) == 0
        out = capsys.readouterr().out
        assert "One Thousand Ninety-Nine Dollars And Two Cents" in out
        assert "Two Dollars" in out

    def test_translate_line_reports_unsupported_magnitude(self) -> None:
        ok, line = main.translate_line("1e40")
        assert ok is False
        assert "UNSUPPORTED_MAGNITUDE" in line
