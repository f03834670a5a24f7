"""
SMILES graph builder.

This module converts SMILES strings into immutable Molecule objects. It walks
the token stream left to right with an explicit branch stack, so arbitrarily
deep branch nesting never touches the Python call stack.

The builder is lenient by design: unknown elements and malformed bracket
contents resolve to a best-effort symbol (logged as a warning) rather than
failing. Structural problems such as unpaired ring labels are the job of
:func:`smilescope.validation.validate`. Pass ``strict=True`` to turn element
fallbacks into :class:`UnknownElementError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

import structlog

from smilescope.config import settings
from smilescope.elements import (
    AROMATIC_ORGANIC,
    AROMATIC_SYMBOLS,
    UNKNOWN_SYMBOL,
    is_known_symbol,
)
from smilescope.exceptions import EmptyInputError, InputTypeError, UnknownElementError
from smilescope.tokenizer import (
    AtomToken,
    BondToken,
    BranchClose,
    BranchOpen,
    FragmentSeparator,
    RingClosure,
    Token,
    _Cursor,
    tokenize,
)
from smilescope.types import Atom, Bond, Molecule

logger = structlog.get_logger()

# Bond symbol -> (order, aromatic)
_BOND_CHARS: Final[dict[str, tuple[int, bool]]] = {
    "-": (1, False),
    "=": (2, False),
    "#": (3, False),
    ":": (1, True),
}

# Extended chirality classes: @TH1, @AL2, @SP3, @TB12, @OH25
_CHIRAL_CLASSES: Final[frozenset[str]] = frozenset({"TH", "AL", "SP", "TB", "OH"})


@dataclass(slots=True)
class _AtomSpec:
    """Resolved atom fields before the atom gets an index."""
    
    symbol: str
    is_aromatic: bool = False
    is_bracket: bool = False
    explicit_hydrogens: int | None = None
    charge: int = 0
    isotope: int | None = None
    chirality: str | None = None
    atom_class: int | None = None


@dataclass
class _ParserState:
    """Call-scoped mutable state of one parse."""
    
    atoms: list[Atom] = field(default_factory=list)
    bonds: list[Bond] = field(default_factory=list)
    
    # Ring label -> (opening atom, bond symbol written at the opening)
    open_rings: dict[int, tuple[int, str | None]] = field(default_factory=dict)
    
    # Attachment points saved by "("
    branch_stack: list[int | None] = field(default_factory=list)
    
    current: int | None = None
    pending_bond: str | None = None
    ring_closures: int = 0


class SmilesParser:
    """SMILES string parser.
    
    Supported features:
        - Organic subset atoms (B, C, N, O, P, S, F, Cl, Br, I) and their
          aromatic lowercase forms
        - Bracket atoms with isotopes, chirality, hydrogens, charges and
          atom classes
        - Single, double, triple and aromatic bond symbols
        - Ring closures (0-9, %nn, %(n))
        - Branches (parentheses)
        - Multi-component molecules (dot separator)
    
    Stereo bond markers (``/``, ``\\``) are read and ignored.
    
    Example:
        >>> parser = SmilesParser("CCO")
        >>> mol = parser.parse()
        >>> len(mol.atoms)
        3
    
    For convenience, use the module-level `parse()` function:
        >>> from smilescope import parse
        >>> mol = parse("CCO")
    """
    
    def __init__(self, smiles: str, *, strict: bool | None = None) -> None:
        """Initialize parser with a SMILES string.
        
        Args:
            smiles: SMILES string to parse.
            strict: Raise on unresolvable bracket elements instead of
                falling back. Defaults to ``settings.strict_elements``.
        
        Raises:
            InputTypeError: If smiles is not a string.
            EmptyInputError: If smiles is empty or whitespace only.
        """
        if not isinstance(smiles, str):
            raise InputTypeError(smiles)
        if not smiles.strip():
            raise EmptyInputError(smiles)
        
        self._smiles = smiles
        self._strict = settings.strict_elements if strict is None else strict
        self._state = _ParserState()
    
    def parse(self) -> Molecule:
        """Parse the SMILES string into a Molecule.
        
        Returns:
            Parsed Molecule object.
        
        Raises:
            UnknownElementError: In strict mode, for an unresolvable atom.
        """
        state = self._state
        
        for token in tokenize(self._smiles):
            self._consume(token)
        
        if state.open_rings:
            logger.debug(
                "smiles_unclosed_ring_labels",
                smiles=self._smiles,
                labels=sorted(state.open_rings),
            )
        if state.branch_stack:
            logger.debug(
                "smiles_unclosed_branches",
                smiles=self._smiles,
                depth=len(state.branch_stack),
            )
        
        return Molecule(
            atoms=tuple(state.atoms),
            bonds=tuple(state.bonds),
            ring_closure_count=state.ring_closures,
            smiles=self._smiles,
        )
    
    def _consume(self, token: Token) -> None:
        """Apply one token to the parser state."""
        state = self._state
        
        if isinstance(token, AtomToken):
            spec = self._resolve_bracket(token) if token.bracket else self._resolve_organic(token)
            self._add_atom(spec)
        elif isinstance(token, BondToken):
            state.pending_bond = token.symbol
        elif isinstance(token, BranchOpen):
            state.branch_stack.append(state.current)
        elif isinstance(token, BranchClose):
            if state.branch_stack:
                state.current = state.branch_stack.pop()
            else:
                logger.debug("smiles_stray_branch_close", smiles=self._smiles, position=token.position)
        elif isinstance(token, RingClosure):
            self._ring_closure(token)
        elif isinstance(token, FragmentSeparator):
            state.current = None
            state.pending_bond = None
        else:
            raise TypeError(f"Unhandled token: {token!r}")
    
    def _add_atom(self, spec: _AtomSpec) -> None:
        """Create an atom and bond it to the current attachment point."""
        state = self._state
        idx = len(state.atoms)
        state.atoms.append(Atom(
            idx=idx,
            symbol=spec.symbol,
            is_aromatic=spec.is_aromatic,
            is_bracket=spec.is_bracket,
            explicit_hydrogens=spec.explicit_hydrogens,
            charge=spec.charge,
            isotope=spec.isotope,
            chirality=spec.chirality,
            atom_class=spec.atom_class,
        ))
        
        if state.current is not None:
            self._add_bond(state.current, idx, state.pending_bond)
        state.pending_bond = None
        state.current = idx
    
    def _add_bond(self, atom1_idx: int, atom2_idx: int, symbol: str | None) -> None:
        state = self._state
        if symbol is not None:
            order, aromatic = _BOND_CHARS[symbol]
        else:
            # Implicit bond: aromatic between two aromatic atoms, else single
            order = 1
            aromatic = state.atoms[atom1_idx].is_aromatic and state.atoms[atom2_idx].is_aromatic
        
        state.bonds.append(Bond(
            idx=len(state.bonds),
            atom1_idx=atom1_idx,
            atom2_idx=atom2_idx,
            order=order,
            is_aromatic=aromatic,
            is_explicit=symbol is not None,
        ))
    
    def _ring_closure(self, token: RingClosure) -> None:
        """Open or close a ring label at the current atom."""
        state = self._state
        
        if state.current is None:
            logger.debug(
                "smiles_ring_label_without_atom",
                smiles=self._smiles,
                label=token.label,
                position=token.position,
            )
            return
        
        if token.label in state.open_rings:
            opener, open_symbol = state.open_rings.pop(token.label)
            symbol = state.pending_bond or open_symbol
            if opener == state.current:
                logger.debug(
                    "smiles_self_ring_closure",
                    smiles=self._smiles,
                    label=token.label,
                    position=token.position,
                )
            else:
                self._add_bond(opener, state.current, symbol)
                state.ring_closures += 1
        else:
            state.open_rings[token.label] = (state.current, state.pending_bond)
        
        state.pending_bond = None
    
    def _resolve_organic(self, token: AtomToken) -> _AtomSpec:
        """Resolve an organic-subset atom (written without brackets)."""
        text = token.text
        if text in AROMATIC_ORGANIC:
            return _AtomSpec(AROMATIC_SYMBOLS[text], is_aromatic=True)
        if is_known_symbol(text):
            return _AtomSpec(text)
        return _AtomSpec(self._fallback_symbol(token))
    
    def _resolve_bracket(self, token: AtomToken) -> _AtomSpec:
        """Resolve a bracket atom ``[isotope symbol chirality H charge :class]``."""
        cur = _Cursor(token.text)
        isotope = cur.read_number()
        
        symbol: str | None = None
        aromatic = False
        
        char1 = cur.peek()
        if char1 == "*":
            cur.next()
            symbol = UNKNOWN_SYMBOL
        elif char1 is not None and char1.isalpha():
            char2 = cur.peek(1)
            if char2 is not None and char2.islower():
                candidate = char1 + char2
                if is_known_symbol(candidate):
                    symbol = candidate
                elif candidate in AROMATIC_SYMBOLS:
                    symbol = AROMATIC_SYMBOLS[candidate]
                    aromatic = True
                if symbol is not None:
                    cur.skip(2)
            if symbol is None:
                if char1 in AROMATIC_SYMBOLS:
                    symbol = AROMATIC_SYMBOLS[char1]
                    aromatic = True
                elif is_known_symbol(char1):
                    symbol = char1
                else:
                    symbol = self._fallback_symbol(token)
                cur.next()
        else:
            symbol = self._fallback_symbol(token)
        
        spec = _AtomSpec(symbol, is_aromatic=aromatic, is_bracket=True, isotope=isotope)
        
        while not cur.is_eof():
            char = cur.peek()
            
            if char == "@":
                cur.next()
                if cur.peek() == "@":
                    cur.next()
                    spec.chirality = "@@"
                else:
                    spec.chirality = "@"
                    chiral_class = (cur.peek() or "") + (cur.peek(1) or "")
                    if chiral_class in _CHIRAL_CLASSES:
                        cur.skip(2)
                        cur.read_number()
            elif char == "H":
                cur.next()
                count = cur.read_number()
                spec.explicit_hydrogens = count if count is not None else 1
            elif char in "+-":
                spec.charge = self._read_charge(cur)
            elif char == ":":
                cur.next()
                spec.atom_class = cur.read_number()
            else:
                cur.next()
        
        return spec
    
    @staticmethod
    def _read_charge(cur: _Cursor) -> int:
        """Read a charge suffix (+, -, ++, --, +2, -3)."""
        char = cur.peek()
        sign = 1 if char == "+" else -1
        
        count = 0
        while cur.peek() == char:
            cur.next()
            count += 1
        
        num = cur.read_number()
        if num is not None:
            return sign * num
        return sign * count
    
    def _fallback_symbol(self, token: AtomToken) -> str:
        """Best-effort symbol for an unresolvable atom: first letter, uppercased."""
        text = token.text
        letters = [c for c in text if c.isalpha()]
        if self._strict:
            raise UnknownElementError(text, self._smiles, token.position)
        
        fallback = letters[0].upper() if letters else UNKNOWN_SYMBOL
        logger.warning(
            "smiles_unknown_element",
            smiles=self._smiles,
            text=text,
            position=token.position,
            fallback=fallback,
        )
        return fallback


def parse(smiles: str, *, strict: bool | None = None) -> Molecule:
    """Parse a SMILES string into a Molecule.
    
    This is a convenience function that creates a SmilesParser and
    calls parse().
    
    Args:
        smiles: SMILES string to parse.
        strict: Raise on unresolvable elements instead of falling back.
    
    Returns:
        Parsed Molecule object.
    
    Raises:
        InputTypeError: If smiles is not a string.
        EmptyInputError: If smiles is empty.
    
    Example:
        >>> mol = parse("CCO")
        >>> len(mol.atoms)
        3
    """
    return SmilesParser(smiles, strict=strict).parse()


def ensure_molecule(mol_or_smiles: "Molecule | str") -> Molecule:
    """Return a Molecule, parsing the argument first if it is a SMILES string."""
    if isinstance(mol_or_smiles, Molecule):
        return mol_or_smiles
    return parse(mol_or_smiles)
