"""
Word list loading.
"""
import logging
from pathlib import Path
from typing import FrozenSet, Union

from .errors import NotInitialized

logger = logging.getLogger(__name__)


def load_word_list(path: Union[str, Path]) -> FrozenSet[str]:
    """
    Load a line-delimited word list into a set of lowercase words.
    Blank lines and lines starting with '#' are ignored.
    """
    path = Path(path)
    if not path.exists():
        raise NotInitialized(f"Word list not found: {path}")

    words = set()
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            word = line.strip().lower()
            if word and not word.startswith('#'):
                words.add(word)

    logger.info("Loaded %d words from %s", len(words), path)
    return frozenset(words)
