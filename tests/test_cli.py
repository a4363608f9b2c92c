"""
Tests for the nuboundary command line interface.
"""

import pytest

from nuboundary import __version__
from nuboundary.cli import build_parser, main


@pytest.fixture
def sentence_model(tmp_path, sentence_corpus, capsys):
    data = tmp_path / "sentences.txt"
    data.write_text("\n".join(sentence_corpus) + "\n", encoding="utf-8")
    output = tmp_path / "sent"
    assert main(["train-sentences", str(data), str(output),
                 "--iterations", "100", "--cutoff", "1", "--no-compress"]) == 0
    assert "Saving the model as:" in capsys.readouterr().out
    return tmp_path / "sent.json"


@pytest.fixture
def token_model(tmp_path, token_corpus, capsys):
    data = tmp_path / "tokens.txt"
    data.write_text("\n".join(token_corpus) + "\n", encoding="utf-8")
    output = tmp_path / "tok"
    assert main(["train-tokens", str(data), str(output), "--iterations", "100", "--cutoff", "1"]) == 0
    capsys.readouterr()
    return tmp_path / "tok.json.xz"


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_subcommand_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_train_writes_model(sentence_model, token_model):
    assert sentence_model.exists()
    assert token_model.exists()


def test_sentences(sentence_model, tmp_path, capsys):
    text = tmp_path / "input.txt"
    text.write_text("The dog barked. Mr. Brown ran home.\n", encoding="utf-8")

    assert main(["sentences", str(sentence_model), str(text)]) == 0
    assert capsys.readouterr().out.splitlines() == ["The dog barked.", "Mr. Brown ran home."]


def test_sentences_with_probabilities(sentence_model, tmp_path, capsys):
    text = tmp_path / "input.txt"
    text.write_text("The dog barked. Mr. Brown ran home.", encoding="utf-8")

    assert main(["sentences", str(sentence_model), str(text), "--probabilities"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "The dog barked.\t1.000000"
    sentence, prob = lines[1].split("\t")
    assert sentence == "Mr. Brown ran home."
    assert 0.5 < float(prob) <= 1.0


def test_sentences_with_abbreviations(sentence_model, tmp_path, capsys):
    text = tmp_path / "input.txt"
    text.write_text("The dog barked. Mr. Brown ran home.", encoding="utf-8")
    abbreviations = tmp_path / "abbrev.txt"
    abbreviations.write_text("barked\n\n", encoding="utf-8")

    assert main(["sentences", str(sentence_model), str(text), "--abbreviations", str(abbreviations)]) == 0
    assert capsys.readouterr().out.splitlines() == ["The dog barked. Mr. Brown ran home."]


def test_tokens(token_model, tmp_path, capsys):
    text = tmp_path / "input.txt"
    text.write_text("Birds sing, cats sleep.\nStop!\n", encoding="utf-8")

    assert main(["tokens", str(token_model), str(text)]) == 0
    assert capsys.readouterr().out.splitlines() == ["Birds sing , cats sleep .", "Stop !"]


def test_tokens_with_probabilities(token_model, tmp_path, capsys):
    text = tmp_path / "input.txt"
    text.write_text("Stop!", encoding="utf-8")

    assert main(["tokens", str(token_model), str(text), "--probabilities"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split("\t")[0] for line in lines] == ["Stop", "!"]
    assert lines[1].endswith("\t1.000000")


def test_missing_model(tmp_path, capsys):
    assert main(["sentences", str(tmp_path / "missing.json"), str(tmp_path / "x.txt")]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_training_error(tmp_path, capsys):
    data = tmp_path / "empty.txt"
    data.write_text("no candidates here\n", encoding="utf-8")
    assert main(["train-sentences", str(data), str(tmp_path / "out")]) == 1
    assert "No training events" in capsys.readouterr().err
