from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from evil_hangman.engine.validation import is_word, normalize_word

# Bundled word list used by the CLIs when no --dictionary is given.
DEFAULT_DICTIONARY = Path(__file__).parent / "data" / "dictionary.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_dictionary(p: Path | str = DEFAULT_DICTIONARY) -> List[str]:
    """
    Load a word-per-line dictionary: lowercased, blanks and anything that
    isn't made of ASCII letters dropped, duplicates removed (first
    occurrence wins).
    """
    seen, out = set(), []
    for ln in read_lines(p):
        w = normalize_word(ln)
        if not is_word(w) or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out
