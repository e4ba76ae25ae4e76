"""
Dictionary validator.

What this module does:
- Check a word-per-line dictionary file before a game or a batch run.
- Count valid (ASCII-letter) words, duplicates and invalid lines; compute the
  SHA-256 of the raw file.
- Build a word-length histogram so a bad --length is caught up front instead
  of surfacing later as an EmptyStateError.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from evil_hangman.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("evil_hangman/datasets/data/dictionary.txt", length=5)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib

from evil_hangman.engine.validation import is_word, normalize_word
from .io import read_lines


@dataclass
class DictionaryReport:
    path: str
    exists: bool
    sha256: str              # of raw file bytes (empty string if missing)
    lines: int
    valid_count: int         # ASCII-letter words, duplicates included
    unique_count: int
    invalid_lines: int
    lengths: Dict[int, int]  # word length -> unique words
    length: Optional[int]    # requested word length, if any
    length_count: int        # unique words of `length` (0 if not requested)
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int, int]:
    """
    Returns (valid_words, invalid_count, line_count).

    Lines are split exactly as load_dictionary splits them. A line is valid
    when, after stripping and lowercasing, it is made of ASCII letters only;
    blank lines count as invalid.
    """
    raw_lines = read_lines(path)
    valid = [w for w in (normalize_word(ln) for ln in raw_lines) if is_word(w)]
    return valid, len(raw_lines) - len(valid), len(raw_lines)


def validate_dictionary(path: str, length: Optional[int] = None) -> Dict:
    """
    Validate a dictionary file, optionally for a specific word length.

    Pass criteria: file exists, has at least one valid word, and (when
    `length` is given) has at least one word of that length. Invalid lines
    and duplicates are reported as issues but don't fail the check, since
    the loaders skip them.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"dictionary file not found: {path}")
        rep = DictionaryReport(
            path=path, exists=False, sha256="", lines=0, valid_count=0, unique_count=0,
            invalid_lines=0, lengths={}, length=length, length_count=0,
            passed=False, issues=issues,
        )
        return asdict(rep)

    words, invalid, lines = _load_and_check(p)
    unique = set(words)
    lengths = dict(sorted(Counter(len(w) for w in unique).items()))
    length_count = lengths.get(length, 0) if length is not None else 0

    if not unique:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append(f"dictionary contains {len(words) - len(unique)} duplicate word(s)")
    if length is not None and length_count == 0:
        issues.append(f"no words of length {length}")

    passed = bool(unique) and (length is None or length_count > 0)

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        lines=lines,
        valid_count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        lengths=lengths,
        length=length,
        length_count=length_count,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        dictionary=412 (uniq=410, sha=abc123...) | length=5: 96 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    parts = [f"dictionary={report['valid_count']} (uniq={report['unique_count']}, sha={sha})"]
    if report.get("length") is not None:
        parts.append(f"length={report['length']}: {report['length_count']}")
    parts.append(status)
    return " | ".join(parts)
