from typing_extensions import Any, Optional, Self

from .errors import NoCandidates, PetnameError
from .log import Log
from .request import Request
from .rng import choose, default_rng
from .words import WordList, WordStore

Pools = dict[tuple[str, Optional[str]], WordList]


def slots(words: int) -> list[str]:
    """
    Assign a word category to each slot of a name.

    One word is a noun, two are adjective and noun, and longer names start
    with an adverb followed by (words - 2) adjectives and a noun.

    :param words: Number of words in the name.
    :return: Category names in slot order.
    """
    if words <= 0:
        return []
    if words == 1:
        return ['nouns']
    if words == 2:
        return ['adjectives', 'nouns']
    return ['adverbs', *(['adjectives'] * (words - 2)), 'nouns']


def initial(word: str) -> str:
    return word[:1].lower()


def candidates(
    wordlist: WordList, letter: Optional[str] = None, letters: int = 0
) -> WordList:
    """
    Filter a word list by first letter and maximum length.

    :param wordlist: Words to filter.
    :param letter: Required first letter, compared case-insensitively,
        defaults to None.
    :param letters: Maximum word length, 0 for unlimited, defaults to 0.
    :return: Words satisfying both constraints, in original order.
    """
    if letter is None and letters <= 0:
        return wordlist
    return tuple(
        w
        for w in wordlist
        if (letter is None or initial(w) == letter)
        and (letters <= 0 or len(w) <= letters)
    )


class Generator(object):
    """Draws names from a :class:`petnamer.resources.words.WordStore`.

    The generator only reads from its store, so one store can be shared by
    many generators and threads, each with their own randomness source."""

    def __init__(self, store: WordStore, log: Optional[Log] = None):
        self.store = store
        self.log = log if log is not None else Log('INFO')

    def generate_raw(
        self,
        rng: Any,
        request: Optional[Request] = None,
        pools: Optional[Pools] = None,
    ) -> list[str]:
        """
        Draw one word per slot without joining them.

        :param rng: Randomness source, see :mod:`petnamer.resources.rng`.
        :param request: :class:`petnamer.resources.request.Request`, defaults
            to a two word request.
        :param pools: Filtered word lists to reuse, keyed by category and
            first letter. Only valid for one request, defaults to None.
        :raises NoCandidates: A slot has no word satisfying the filters.
        :return: Words in slot order.
        """
        if request is None:
            request = Request()

        letter = request.fixed_letter
        # filtered lists only depend on category and letter for one request
        cache = pools if pools is not None else {}
        parts = []
        for category in slots(request.words):
            key = (category, letter)
            if key not in cache:
                cache[key] = candidates(
                    self.store.category(category), letter, request.letters
                )
            pool = cache[key]
            if not pool:
                raise NoCandidates(category, letter, request.letters)

            word = choose(rng, pool)
            if letter is None and request.alliterate:
                letter = initial(word)
            parts.append(word)

        return parts

    def generate(
        self,
        rng: Any,
        request: Optional[Request] = None,
        pools: Optional[Pools] = None,
    ) -> str:
        """
        Generate a single name.

        :param rng: Randomness source.
        :param request: Generation parameters, defaults to None.
        :param pools: See :meth:`generate_raw`, defaults to None.
        :raises NoCandidates: A slot has no word satisfying the filters.
        :return: Words joined with the request's separator.
        """
        if request is None:
            request = Request()
        try:
            parts = self.generate_raw(rng, request, pools)
        except NoCandidates as e:
            self.log.debug(f'Generation failed for {request}: {e}')
            raise
        return request.separator.join(parts)

    def iter(self, rng: Any, request: Optional[Request] = None) -> 'Names':
        """
        Lazily generate names for as long as the caller pulls them.

        :param rng: Randomness source, owned by the iterator while in use.
        :param request: Generation parameters, defaults to None.
        :return: :class:`petnamer.resources.generator.Names` iterator.
        """
        return Names(self, rng, request if request is not None else Request())

    def cardinality(self, words: int) -> int:
        return self.store.cardinality(words)


class Names(object):
    """Unbounded iterator of names. Each pull performs one full generation.

    A failed pull raises the generation error to the caller and ends the
    iterator, so later pulls raise StopIteration. Limit it with
    :func:`itertools.islice` or ``zip``."""

    def __init__(self, generator: Any, rng: Any, request: Request):
        self.generator = generator
        self.rng = rng
        self.request = request
        self.finished = False
        self.pools: Pools = {}
        """Filtered word lists, kept across pulls."""

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> str:
        if self.finished:
            raise StopIteration
        try:
            return self.draw()
        except PetnameError:
            self.finished = True
            raise

    def draw(self) -> str:
        return self.generator.generate(self.rng, self.request, self.pools)

    def cardinality(self) -> int:
        """Number of distinct names this iterator can produce, ignoring
        filters."""
        return self.generator.cardinality(self.request.words)


def generate(
    rng: Any, store: WordStore, request: Optional[Request] = None
) -> str:
    """Generate one name from a store. See :meth:`Generator.generate`."""
    return Generator(store).generate(rng, request)


def iter_names(
    rng: Any, store: WordStore, request: Optional[Request] = None
) -> Names:
    """Lazily generate names from a store. See :meth:`Generator.iter`."""
    return Generator(store).iter(rng, request)


def petname(words: int = 2, separator: str = '-') -> str:
    """
    Generate a name from the small built-in word lists and a fresh default
    randomness source.

    :param words: Number of words, defaults to 2.
    :param separator: Separator between words, defaults to '-'.
    :raises CapabilityUnavailable: Built-in word data is not installed.
    :return: Generated name.
    """
    store = WordStore.default('small')
    request = Request(words=words, separator=separator)
    return Generator(store).generate(default_rng(), request)
