from typing_extensions import Any, Callable, Optional

from .errors import NoCandidates
from .generator import Generator, Names, initial
from .log import Log
from .request import Request
from .rng import choose
from .words import Categories, WordStore


class Alliterations(object):
    """A word store split into one store per first letter.

    Every name drawn from a single group alliterates. Cardinality of the
    whole is the sum of its groups' cardinalities."""

    def __init__(self, store: WordStore, log: Optional[Log] = None):
        self.log = log if log is not None else Log('INFO')
        lists: dict[str, dict[str, list[str]]] = {}
        for category in Categories:
            for word in store.category(category):
                letter = initial(word)
                if not letter:
                    continue
                group = lists.setdefault(
                    letter, {c: [] for c in Categories}
                )
                group[category].append(word)

        self.groups: dict[str, WordStore] = {
            letter: WordStore(**lists[letter]) for letter in sorted(lists)
        }
        """Word stores keyed by lower case first letter."""

    def letters(self) -> list[str]:
        return list(self.groups.keys())

    def retain(self, predicate: Callable[[str, WordStore], bool]) -> None:
        """
        Keep only the groups for which predicate(letter, store) is true.

        :param predicate: Function of a letter and its word store.
        """
        self.groups = {
            k: v for k, v in self.groups.items() if predicate(k, v)
        }

    def cardinality(self, words: int) -> int:
        return sum(g.cardinality(words) for g in self.groups.values())

    def generate(
        self, rng: Any, words: int = 2, separator: str = '-'
    ) -> str:
        """
        Pick one letter group uniformly and generate a name from it.

        :param rng: Randomness source.
        :param words: Number of words, defaults to 2.
        :param separator: Separator between words, defaults to '-'.
        :raises NoCandidates: No groups, or the chosen group cannot fill
            every slot.
        :return: Alliterating name.
        """
        request = Request(words=words, separator=separator)
        if not self.groups:
            raise NoCandidates('words')
        if words == 0:
            return ''
        letter = choose(rng, self.letters())
        self.log.debug(f"Generating alliterating name with '{letter}'")
        return Generator(self.groups[letter], self.log).generate(rng, request)

    def iter(
        self, rng: Any, words: int = 2, separator: str = '-'
    ) -> 'AlliterationNames':
        """
        Lazily generate alliterating names, choosing a letter group on every
        pull.

        :param rng: Randomness source, owned by the iterator while in use.
        :param words: Number of words, defaults to 2.
        :param separator: Separator between words, defaults to '-'.
        :return: Iterator ending after the first failed pull.
        """
        request = Request(words=words, separator=separator)
        return AlliterationNames(self, rng, request)

    def __eq__(self, other):
        if not isinstance(other, Alliterations):
            return NotImplemented
        return self.groups == other.groups

    def __repr__(self):
        return f'Alliterations({self.letters()})'


class AlliterationNames(Names):
    """:class:`petnamer.resources.generator.Names` over letter groups."""

    def draw(self) -> str:
        return self.generator.generate(
            self.rng, self.request.words, self.request.separator
        )
