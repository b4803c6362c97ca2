import pytest

from solver.play_cli import main

WORDS = {"shake", "shame", "shape", "share", "crane", "mover"}


@pytest.fixture
def prefix(tmp_path):
    (tmp_path / "en_allowed.txt").write_text("shake shame shape share crane mover\n")
    (tmp_path / "en_correct.txt").write_text("shake shame shape share\n")
    return str(tmp_path / "en")


@pytest.fixture
def typed(monkeypatch):
    """Feed scripted lines to input(); EOF once they run out."""

    def script(*lines):
        it = iter(lines)

        def fake_input(prompt=""):
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)

    return script


def test_reveal_rejects_then_solves(prefix, typed, capsys):
    typed("?", "xx", "zzzzz", "SHARE")
    assert main([prefix, "--answer", "share"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "Correct word: share" in out
    assert any(line.startswith("Invalid guess:") for line in out)
    assert "Not in the word list." in out
    assert out[-1] == "CORRECT!"


def test_hint_suggests_a_listed_word(prefix, typed, capsys):
    typed("hint", "q")
    assert main([prefix, "--answer", "shape"]) == 0
    out = capsys.readouterr().out.splitlines()
    hint = next(line for line in out if line.startswith("hint: "))
    assert hint.split()[1] in WORDS
    assert out[-1] == "bye!"


def test_out_of_guesses(prefix, typed, capsys):
    typed("shake")
    assert main([prefix, "--answer", "share", "--max-guesses", "1"]) == 1
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "22202",
        "3 possible answers left",
        "Out of guesses. The answer was share.",
    ]


def test_end_of_input_quits(prefix, typed, capsys):
    typed()
    assert main([prefix, "--seed", "3"]) == 0


@pytest.mark.parametrize("answer", ["xx", "crane"])
def test_bad_answer_is_a_usage_error(prefix, typed, answer):
    typed()
    with pytest.raises(SystemExit) as exc:
        main([prefix, "--answer", answer])
    assert exc.value.code == 2
