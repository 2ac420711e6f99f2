import json

from dataclasses import dataclass, field, asdict
from typing_extensions import Optional

from .errors import InvalidRequest

MaxWords = 255


@dataclass
class Request:
    """Parameters for generating one name. Holds no state between calls."""

    words: int = field(default=2)
    """Number of words in a name, 0 through 255, defaults to 2"""
    separator: str = field(default='-')
    """String placed between words, may be empty, defaults to '-'"""
    letters: int = field(default=0)
    """Maximum number of letters per word, 0 for unlimited, defaults to 0"""
    alliterate: bool = field(default=False)
    """All words begin with the same letter as the first word drawn,
    defaults to False"""
    alliterate_with: Optional[str] = field(default=None)
    """All words begin with this letter. Takes precedence over alliterate,
    defaults to None"""

    def __post_init__(self) -> None:
        if isinstance(self.words, bool) or not isinstance(self.words, int):
            raise InvalidRequest(
                f'Invalid word count {self.words!r}. Must be an integer.'
            )
        if not 0 <= self.words <= MaxWords:
            raise InvalidRequest(
                f'Invalid word count ({self.words}). Must be between 0 and'
                f' {MaxWords}.'
            )
        if not isinstance(self.separator, str):
            raise InvalidRequest(
                f'Invalid separator {self.separator!r}. Must be a string.'
            )
        if isinstance(self.letters, bool) or not isinstance(self.letters, int):
            raise InvalidRequest(
                f'Invalid letter count {self.letters!r}. Must be an integer.'
            )
        if self.letters < 0:
            raise InvalidRequest(
                f'Invalid letter count ({self.letters}). Must be 0 or more.'
            )
        if self.alliterate_with is not None:
            a = self.alliterate_with
            if not isinstance(a, str) or len(a) != 1 or not a.isalpha():
                raise InvalidRequest(
                    f'Invalid alliteration letter {a!r}. Must be a single'
                    ' letter.'
                )
            self.alliterate_with = a.lower()

    @property
    def fixed_letter(self) -> Optional[str]:
        """Letter every word must start with before any draw, if any."""
        return self.alliterate_with

    @property
    def alliterating(self) -> bool:
        return self.alliterate or self.alliterate_with is not None

    def to_json(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict):
        return cls(
            words=data.get('words', 2),
            separator=data.get('separator', '-'),
            letters=data.get('letters', 0),
            alliterate=data.get('alliterate', False),
            alliterate_with=data.get('alliterate_with', None),
        )

    @classmethod
    def from_string(cls, data: str):
        return cls.from_dict(json.loads(data))

    def __repr__(self):
        return json.dumps(self.to_json())
