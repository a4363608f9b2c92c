"""
Command line interface for nuboundary.

Usage:
    nuboundary train-sentences sentences.txt sent-model
    nuboundary train-tokens tokens.txt tok-model --cutoff 5
    nuboundary sentences sent-model.json.xz input.txt --probabilities
    nuboundary tokens tok-model.json.xz input.txt --alpha-numeric
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from nuboundary._version import __version__
from nuboundary.core.constants import (
    SENTENCE_CUTOFF,
    SENTENCE_ITERATIONS,
    TOKEN_CUTOFF,
    TOKEN_ITERATIONS,
)
from nuboundary.core.exceptions import NuboundaryError
from nuboundary.core.parameters import TrainingParameters
from nuboundary.tokenizers import MaxentSentenceDetector, MaxentTokenizer, make_abbreviation_filter


def _read_lines(path: Optional[Path]) -> List[str]:
    if path is None:
        return sys.stdin.read().splitlines()
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()


def _read_text(path: Optional[Path]) -> str:
    if path is None:
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _write_units(units: List[str], probs: Optional[List[float]], out: TextIO) -> None:
    for i, unit in enumerate(units):
        if probs is None:
            out.write(f"{unit}\n")
        else:
            out.write(f"{unit}\t{probs[i]:.6f}\n")


def cmd_train_sentences(args: argparse.Namespace) -> int:
    params = TrainingParameters(iterations=args.iterations, cutoff=args.cutoff, verbose=args.verbose)
    detector = MaxentSentenceDetector.train(_read_lines(args.input), params)
    path = detector.save(args.output, compress=not args.no_compress)
    print(f"Saving the model as: {path}")
    return 0


def cmd_train_tokens(args: argparse.Namespace) -> int:
    params = TrainingParameters(iterations=args.iterations, cutoff=args.cutoff, verbose=args.verbose)
    tokenizer = MaxentTokenizer.train(
        _read_lines(args.input), params, alpha_numeric_optimization=args.alpha_numeric
    )
    path = tokenizer.save(args.output, compress=not args.no_compress)
    print(f"Saving the model as: {path}")
    return 0


def cmd_sentences(args: argparse.Namespace) -> int:
    kwargs = {}
    if args.abbreviations:
        kwargs["is_acceptable_break"] = make_abbreviation_filter(
            a.strip() for a in _read_lines(args.abbreviations) if a.strip()
        )
    detector = MaxentSentenceDetector.load(args.model, **kwargs)
    text = _read_text(args.input)
    result = detector.span_detect(text)
    sentences = [span.covered_text(text).strip() for span in result.units]
    _write_units(sentences, list(result.probabilities) if args.probabilities else None, sys.stdout)
    return 0


def cmd_tokens(args: argparse.Namespace) -> int:
    tokenizer = MaxentTokenizer.load(args.model, alpha_numeric_optimization=args.alpha_numeric)
    probs_out = args.probabilities
    # Tokenize line by line so the output keeps the input's line structure
    for line in _read_lines(args.input):
        result = tokenizer.tokenize_pos(line)
        tokens = [span.covered_text(line) for span in result.units]
        if probs_out:
            _write_units(tokens, list(result.probabilities), sys.stdout)
        else:
            sys.stdout.write(" ".join(tokens) + "\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nuboundary",
        description="Maximum entropy sentence detection and tokenization",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show progress and debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    train_sent = subparsers.add_parser(
        "train-sentences", help="Train a sentence model from one sentence per line"
    )
    train_sent.add_argument("input", type=Path, help="Training data; blank lines separate paragraphs")
    train_sent.add_argument("output", type=Path, help="Where to save the model")
    train_sent.add_argument("--iterations", type=int, default=SENTENCE_ITERATIONS)
    train_sent.add_argument("--cutoff", type=int, default=SENTENCE_CUTOFF)
    train_sent.add_argument("--no-compress", action="store_true", help="Write plain JSON")
    train_sent.set_defaults(func=cmd_train_sentences)

    train_tok = subparsers.add_parser(
        "train-tokens", help="Train a token model from <SPLIT>-annotated lines"
    )
    train_tok.add_argument("input", type=Path, help="Training data")
    train_tok.add_argument("output", type=Path, help="Where to save the model")
    train_tok.add_argument("--iterations", type=int, default=TOKEN_ITERATIONS)
    train_tok.add_argument("--cutoff", type=int, default=TOKEN_CUTOFF)
    train_tok.add_argument("--alpha-numeric", action="store_true",
                           help="Skip purely alphanumeric chunks")
    train_tok.add_argument("--no-compress", action="store_true", help="Write plain JSON")
    train_tok.set_defaults(func=cmd_train_tokens)

    sent = subparsers.add_parser("sentences", help="Print one sentence per line")
    sent.add_argument("model", type=Path, help="Sentence model file")
    sent.add_argument("input", type=Path, nargs="?", help="Input text (default: stdin)")
    sent.add_argument("--probabilities", action="store_true", help="Append the probability of each sentence")
    sent.add_argument("--abbreviations", type=Path, help="File with one abbreviation per line")
    sent.set_defaults(func=cmd_sentences)

    tok = subparsers.add_parser("tokens", help="Print tokens separated by spaces")
    tok.add_argument("model", type=Path, help="Token model file")
    tok.add_argument("input", type=Path, nargs="?", help="Input text (default: stdin)")
    tok.add_argument("--alpha-numeric", action="store_true", help="Keep alphanumeric chunks whole")
    tok.add_argument("--probabilities", action="store_true", help="Print one token and probability per line")
    tok.set_defaults(func=cmd_tokens)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    try:
        return args.func(args)
    except (NuboundaryError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
