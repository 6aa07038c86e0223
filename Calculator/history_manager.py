# history_manager.py
"""""
Calculation history kept as plain "expression = result" lines in a text file.
"""""

import logging
from pathlib import Path

from . import error as E

logger = logging.getLogger(__name__)

history_txt = Path(__file__).resolve().parent.parent / "calculator_history.txt"


def format_entry(expression, result):
    return f"{expression.strip()} = {result}"


def load_history(path=None):
    """Return the stored entries in file order; a missing file is an empty history."""
    source = Path(path or history_txt)
    try:
        with open(source, 'r', encoding='utf-8') as f:
            return [line.rstrip("\n") for line in f if line.strip()]
    except FileNotFoundError:
        return []
    except (OSError, UnicodeDecodeError) as e:
        raise E.HistoryError(f"{source}: {e}", code="5003") from e


def save_history(entries, path=None):
    """Overwrite the history file with `entries`."""
    target = Path(path or history_txt)
    try:
        with open(target, 'w', encoding='utf-8') as f:
            for entry in entries:
                f.write(entry + "\n")
    except OSError as e:
        raise E.HistoryError(f"{target}: {e}") from e
    logger.info("Saved %d history entries to %s", len(entries), target)


def append_entry(entry, path=None):
    target = Path(path or history_txt)
    try:
        with open(target, 'a', encoding='utf-8') as f:
            f.write(entry + "\n")
    except OSError as e:
        raise E.HistoryError(f"{target}: {e}") from e


def clear_history(path=None):
    save_history([], path)
