"""
Word List Dictionary

In-memory dictionary lookup backed by a word list, for hosts without a
platform dictionary service.
"""

from collections.abc import Iterable
from pathlib import Path

from pwpolicy.core.errors import ConfigurationError
from pwpolicy.core.logging import get_logger

logger = get_logger(__name__)


class WordListDictionary:
    """Case-insensitive set of known words."""

    def __init__(self, words: Iterable[str]):
        self._words = frozenset(
            word.strip().lower() for word in words if word and word.strip()
        )

    @classmethod
    def from_file(cls, path: str | Path, encoding: str = "utf-8") -> "WordListDictionary":
        """
        Load a newline-delimited word file such as ``/usr/share/dict/words``.

        Lines starting with ``#`` are ignored.

        Raises:
            ConfigurationError: If the file cannot be read
        """
        path = Path(path)
        try:
            with path.open(encoding=encoding) as f:
                words = [line for line in f if not line.lstrip().startswith("#")]
        except OSError as e:
            raise ConfigurationError(
                f"Failed to load word list {path}: {e}",
                config_key="dictionary_path",
                cause=e,
            ) from e

        dictionary = cls(words)
        logger.info("Word list loaded", path=str(path), word_count=len(dictionary))
        return dictionary

    def is_known_word(self, term: str) -> bool:
        return term.lower() in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and self.is_known_word(term)
