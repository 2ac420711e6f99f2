from typing_extensions import Optional


class PetnameError(Exception):
    """Base class for errors raised while building word stores or names."""


class CapabilityUnavailable(PetnameError):
    """Built-in word data or a default randomness source is not available."""


class InvalidRequest(PetnameError, ValueError):
    """A generation request is structurally invalid. Raised before any draw."""


class NoCandidates(PetnameError):
    """No word in a category satisfies the active filters for a slot."""

    def __init__(
        self,
        category: str,
        letter: Optional[str] = None,
        letters: int = 0,
    ):
        self.category = category
        """Word category that ran dry: 'adjectives', 'adverbs' or 'nouns'"""
        self.letter = letter
        """Alliteration letter in force for the slot, if any"""
        self.letters = letters
        """Maximum word length in force for the slot, 0 when unlimited"""

        msg = f'No {category} available'
        constraints = []
        if letter is not None:
            constraints.append(f"starting with '{letter}'")
        if letters > 0:
            constraints.append(f'of at most {letters} letters')
        if constraints:
            msg = f"{msg} {' and '.join(constraints)}"
        super().__init__(msg)
