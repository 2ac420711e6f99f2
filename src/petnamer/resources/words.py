import json
import importlib.resources
from pathlib import Path

from typing_extensions import Callable, Iterable, Union

from .errors import CapabilityUnavailable, InvalidRequest

Word = str
WordList = tuple[Word, ...]

Categories = ('adjectives', 'adverbs', 'nouns')
"""Word categories, in the order constructors take them."""

Tiers = ('small', 'medium', 'large')
"""Built-in word list size tiers."""


def split_words(text: str) -> list[Word]:
    """Split a block of text on whitespace, dropping blank lines."""
    return text.split()


def dedupe_and_sort(words: Iterable[Word]) -> list[Word]:
    return sorted(set(words))


def read_word_file(path: Union[str, Path]) -> list[Word]:
    """
    Read one word list file, one word per line.

    :param path: Path to the text file.
    :return: List of words in file order.
    """
    with open(path, 'r', encoding='utf-8') as f:
        return split_words(f.read())


class WordStore(object):
    """Holds the adjectives, adverbs and nouns that names are drawn from.

    Lists are kept as tuples of owned strings. The store is never changed by
    generation; :meth:`retain` is the only operation that modifies it."""

    def __init__(
        self,
        adjectives: Iterable[Word] = (),
        adverbs: Iterable[Word] = (),
        nouns: Iterable[Word] = (),
    ):
        self.adjectives: WordList = tuple(adjectives)
        """Adjectives, used for the middle slots of a name."""
        self.adverbs: WordList = tuple(adverbs)
        """Adverbs, used for the first slot of names of 3 or more words."""
        self.nouns: WordList = tuple(nouns)
        """Nouns, always the last slot of a name."""

    @classmethod
    def with_words(
        cls,
        adjectives: Iterable[Word],
        adverbs: Iterable[Word],
        nouns: Iterable[Word],
    ):
        """Construct a store from explicit word lists. Empty lists are
        allowed."""
        return cls(adjectives, adverbs, nouns)

    @classmethod
    def from_text(cls, adjectives: str, adverbs: str, nouns: str):
        """
        Construct a store from whitespace separated blocks of text.

        :param adjectives: Adjectives, eg. "able bold".
        :param adverbs: Adverbs, eg. "boldly".
        :param nouns: Nouns, eg. "ant bee cow".
        :return: :class:`petnamer.resources.words.WordStore`
        """
        return cls(
            split_words(adjectives), split_words(adverbs), split_words(nouns)
        )

    @classmethod
    def default(cls, tier: Union[str, int] = 'small'):
        """
        Construct a store from one of the built-in dictionaries.

        :param tier: 'small', 'medium' or 'large' (or 0, 1, 2), defaults to
            'small'.
        :raises InvalidRequest: Unknown tier.
        :raises CapabilityUnavailable: Built-in word data is not installed.
        :return: :class:`petnamer.resources.words.WordStore`
        """
        if isinstance(tier, int) and not isinstance(tier, bool):
            if not 0 <= tier < len(Tiers):
                raise InvalidRequest(
                    f'Invalid word list tier {tier}. Must be 0, 1 or 2.'
                )
            tier = Tiers[tier]
        if tier not in Tiers:
            raise InvalidRequest(
                f"Invalid word list tier {tier!r}. Must be one of {Tiers}."
            )

        lists = []
        for category in Categories:
            try:
                data = importlib.resources.files(__package__) / 'words' / tier
                text = (data / f'{category}.txt').read_text(encoding='utf-8')
            except (FileNotFoundError, ModuleNotFoundError) as e:
                raise CapabilityUnavailable(
                    f"Default {tier} word list for {category} is not"
                    f" available: {e}"
                ) from e
            lists.append(dedupe_and_sort(split_words(text)))
        return cls(*lists)

    @classmethod
    def from_dir(cls, directory: Union[str, Path]):
        """
        Construct a store from a directory containing adjectives.txt,
        adverbs.txt and nouns.txt. For compatibility with older word list
        directories, names.txt is read when nouns.txt is absent.

        :param directory: Path to the word list directory.
        :raises FileNotFoundError: A word list file is missing.
        :return: :class:`petnamer.resources.words.WordStore`
        """
        d = Path(directory)
        if not d.is_dir():
            raise FileNotFoundError(f"Word list directory '{d}' does not exist")

        lists = []
        for category in Categories:
            p = d / f'{category}.txt'
            if category == 'nouns' and not p.exists():
                if (d / 'names.txt').exists():
                    p = d / 'names.txt'
            if not p.exists():
                raise FileNotFoundError(
                    f"Missing word list '{p.name}' in '{d}'"
                )
            lists.append(read_word_file(p))
        return cls(*lists)

    def retain(self, predicate: Callable[[Word], bool]) -> None:
        """
        Keep only the words that satisfy the predicate, in all three lists.
        Relative order is preserved. Lists may end up empty.

        :param predicate: Function of a single word.
        """
        self.adjectives = tuple(w for w in self.adjectives if predicate(w))
        self.adverbs = tuple(w for w in self.adverbs if predicate(w))
        self.nouns = tuple(w for w in self.nouns if predicate(w))

    def category(self, name: str) -> WordList:
        if name not in Categories:
            raise KeyError(name)
        return getattr(self, name)

    def cardinality(self, words: int) -> int:
        """
        Count the distinct names available for a number of words without
        enumerating them.

        Names of 3 or more words repeat the adjective slot, so the adjective
        count is raised to the power of (words - 2).

        :param words: Number of words in a name.
        :return: Number of possible names, 0 for zero words.
        """
        a = len(self.adjectives)
        v = len(self.adverbs)
        n = len(self.nouns)
        if words <= 0:
            return 0
        if words == 1:
            return n
        if words == 2:
            return a * n
        return v * a ** (words - 2) * n

    def sizes(self) -> dict[str, int]:
        return {c: len(self.category(c)) for c in Categories}

    def __len__(self):
        return sum(self.sizes().values())

    def __bool__(self):
        return True

    def __eq__(self, other):
        if not isinstance(other, WordStore):
            return NotImplemented
        return (
            self.adjectives == other.adjectives
            and self.adverbs == other.adverbs
            and self.nouns == other.nouns
        )

    def to_json(self):
        return {c: list(self.category(c)) for c in Categories}

    @classmethod
    def from_string(cls, data: str):
        x = json.loads(data)
        return cls(x['adjectives'], x['adverbs'], x['nouns'])

    def __repr__(self):
        return f'WordStore({self.sizes()})'
