"""
SMILES tokenizer.

Scans a SMILES string into a flat sequence of typed tokens. The tokenizer is
total: it never raises for string input and silently skips characters it does
not recognise (stereo bond markers, stray punctuation). Structural problems
are reported by :func:`smilescope.validation.validate` instead.

    >>> [type(t).__name__ for t in tokenize("C(=O)O")]
    ['AtomToken', 'BranchOpen', 'BondToken', 'AtomToken', 'BranchClose', 'AtomToken']
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Final, Iterator, Union

from smilescope.elements import TWO_LETTER_ORGANIC

# ASCII only: str.isdigit also accepts superscripts and other scripts
DIGITS: Final[frozenset[str]] = frozenset("0123456789")


def is_digit(char: str) -> bool:
    """Check if char is a single ASCII digit."""
    return char in DIGITS


class _Cursor:
    """Character cursor over a string with lookahead.
    
    Shared by the tokenizer and the bracket-atom reader of the parser.
    """
    
    __slots__ = ("_string", "_pos")
    
    def __init__(self, string: str) -> None:
        self._string = string
        self._pos = 0
    
    @property
    def position(self) -> int:
        """Current position in the string."""
        return self._pos
    
    @property
    def remaining(self) -> str:
        """Remaining unconsumed string."""
        return self._string[self._pos:]
    
    def peek(self, offset: int = 0) -> str | None:
        """Look at character at current position + offset without consuming.
        
        Args:
            offset: Positions ahead to look (default 0 = current).
        
        Returns:
            Character at position, or None if past end.
        """
        pos = self._pos + offset
        if pos >= len(self._string):
            return None
        return self._string[pos]
    
    def next(self) -> str | None:
        """Consume and return the next character, or None at end."""
        if self._pos >= len(self._string):
            return None
        char = self._string[self._pos]
        self._pos += 1
        return char
    
    def skip(self, count: int = 1) -> None:
        """Skip forward by count characters."""
        self._pos = min(self._pos + count, len(self._string))
    
    def read_while(self, predicate: Callable[[str], bool]) -> str:
        """Read characters while predicate is true."""
        start = self._pos
        while self._pos < len(self._string) and predicate(self._string[self._pos]):
            self._pos += 1
        return self._string[start:self._pos]
    
    def read_number(self) -> int | None:
        """Read and return an integer, or None if no digits present."""
        digits = self.read_while(is_digit)
        return int(digits) if digits else None
    
    def find(self, char: str) -> int:
        """Index of the next occurrence of char at or after the cursor, or -1."""
        return self._string.find(char, self._pos)
    
    def is_eof(self) -> bool:
        """Check if at end of string."""
        return self._pos >= len(self._string)


@dataclass(frozen=True, slots=True)
class AtomToken:
    """An atom, either organic subset (``Cl``, ``c``) or bracketed.
    
    Attributes:
        text: Atom text; for bracket atoms the contents without brackets.
        bracket: True for ``[...]`` atoms.
        position: Offset of the token in the SMILES string.
    """
    
    text: str
    bracket: bool = False
    position: int = 0


@dataclass(frozen=True, slots=True)
class BondToken:
    """An explicit bond symbol: ``-``, ``=``, ``#`` or ``:``."""
    
    symbol: str
    position: int = 0


@dataclass(frozen=True, slots=True)
class BranchOpen:
    """Opening parenthesis."""
    
    position: int = 0


@dataclass(frozen=True, slots=True)
class BranchClose:
    """Closing parenthesis."""
    
    position: int = 0


@dataclass(frozen=True, slots=True)
class RingClosure:
    """Ring-closure label (``1``, ``%12`` or ``%(123)``)."""
    
    label: int
    position: int = 0


@dataclass(frozen=True, slots=True)
class FragmentSeparator:
    """Dot separating disconnected components."""
    
    position: int = 0


Token = Union[AtomToken, BondToken, BranchOpen, BranchClose, RingClosure, FragmentSeparator]

BOND_SYMBOLS: Final[frozenset[str]] = frozenset("-=#:")


def iter_tokens(smiles: str) -> Iterator[Token]:
    """Lazily scan a SMILES string into tokens.
    
    Args:
        smiles: SMILES string.
    
    Yields:
        Tokens in string order.
    """
    cur = _Cursor(smiles)
    
    while not cur.is_eof():
        pos = cur.position
        char = cur.next()
        assert char is not None
        
        if char == "(":
            yield BranchOpen(pos)
        elif char == ")":
            yield BranchClose(pos)
        elif char in BOND_SYMBOLS:
            yield BondToken(char, pos)
        elif char in DIGITS:
            yield RingClosure(int(char), pos)
        elif char == "%":
            label = _read_percent_label(cur)
            if label is not None:
                yield RingClosure(label, pos)
        elif char == ".":
            yield FragmentSeparator(pos)
        elif char == "[":
            close = cur.find("]")
            if close == -1:
                text = cur.remaining
                cur.skip(len(text))
            else:
                text = smiles[cur.position:close]
                cur.skip(close + 1 - cur.position)
            yield AtomToken(text, bracket=True, position=pos)
        elif char.isalpha():
            two = char + (cur.peek() or "")
            if two in TWO_LETTER_ORGANIC:
                cur.next()
                yield AtomToken(two, position=pos)
            else:
                yield AtomToken(char, position=pos)
        # Anything else (/, \, @, stray punctuation) is skipped


def _read_percent_label(cur: _Cursor) -> int | None:
    """Read the label following ``%``; returns None (and consumes nothing) if malformed."""
    if cur.peek() == "(":
        close = cur.find(")")
        inner = cur.remaining[1:close - cur.position] if close != -1 else ""
        if inner and all(c in DIGITS for c in inner):
            cur.skip(close + 1 - cur.position)
            return int(inner)
        return None
    
    d1, d2 = cur.peek(), cur.peek(1)
    if d1 is not None and d2 is not None and d1 in DIGITS and d2 in DIGITS:
        cur.skip(2)
        return int(d1 + d2)
    return None


def tokenize(smiles: str) -> list[Token]:
    """Scan a SMILES string into a list of tokens.
    
    Two-letter organic symbols (``Cl``, ``Br``) are matched greedily before
    single letters. Bracket contents are kept verbatim for the parser to
    resolve. Unrecognised characters are skipped.
    
    Args:
        smiles: SMILES string.
    
    Returns:
        List of tokens.
    
    Example:
        >>> len([t for t in tokenize("CCO") if isinstance(t, AtomToken)])
        3
    """
    return list(iter_tokens(smiles))
