"""Tests for the command-line scripts."""

import pytest

from poker_showdown.scripts import best_hand as cli
from poker_showdown.scripts import smoke_showdown


class TestBestHandCli:
    def test_plain_output_lists_winners(self, capsys):
        code = cli.main(["--plain", "2♤ 3♡ 4♧ 5♢ 7♤", "10♧ J♧ Q♧ K♧ A♧", "10♡ J♡ Q♡ K♡ A♡"])
        assert code == 0
        out = capsys.readouterr().out
        assert out.splitlines() == ["10♧ J♧ Q♧ K♧ A♧", "10♡ J♡ Q♡ K♡ A♡"]

    def test_invalid_hand_exit_code(self, capsys):
        code = cli.main(["--plain", "2♤ 3♡ 4♧ 5♢ 7♤", "1♤ 2♡ 3♧ 4♢ 5♤"])
        assert code == cli.EXIT_INVALID_HAND
        assert "invalid rank" in capsys.readouterr().err

    def test_rich_output_with_ranking(self, capsys):
        code = cli.main(["--ranking", "A♤ 2♡ 3♧ 4♢ 5♤", "2♤ 3♡ 4♧ 5♢ 6♤"])
        assert code == 0
        out = capsys.readouterr().out
        assert "Straight, 6 high" in out
        assert "Straight, 5 high" in out
        assert "Winner" in out

    def test_reads_file(self, tmp_path, capsys):
        path = tmp_path / "hands.txt"
        path.write_text("4♤ 4♡ 3♧ 3♢ 9♤\n\n2♤ 2♡ 5♧ 5♢ 3♤\n", encoding="utf-8")
        assert cli.main(["--plain", "--file", str(path)]) == 0
        assert capsys.readouterr().out.splitlines() == ["2♤ 2♡ 5♧ 5♢ 3♤"]

    def test_no_duplicates_flag(self, capsys):
        code = cli.main(["--plain", "--no-duplicates", "A♤ A♤ K♡ Q♧ J♢", "2♤ 3♡ 4♧ 5♢ 7♤"])
        assert code == cli.EXIT_INVALID_HAND
        assert "duplicate card" in capsys.readouterr().err

    def test_vectorized_flag(self, capsys):
        code = cli.main(["--plain", "--vectorized", "8♤ 8♡ 8♧ 8♢ 7♤", "8♤ 8♡ 8♧ 8♢ 9♤"])
        assert code == 0
        assert capsys.readouterr().out.splitlines() == ["8♤ 8♡ 8♧ 8♢ 9♤"]


@pytest.mark.parametrize("decks", ["1", "3"])
def test_smoke_script_passes(decks, capsys):
    code = smoke_showdown.main(["--tables", "20", "--hands", "5", "--decks", decks, "--seed", "7"])
    assert code == 0
    assert "OK" in capsys.readouterr().out
