"""
Morgan-style circular fingerprints.

Each atom starts with an identifier hashed from its element, degree and
aromaticity. At every radius the identifier is re-hashed together with the
sorted identifiers of its neighbours (offset by bond order), and every
identifier seen sets one bit ``identifier % n_bits``.

Identifiers are 32-bit FNV-1a hashes, so fingerprints are deterministic
across runs and platforms. With the default 128 bits collisions are common
for large collections; use 2048 bits or more for production similarity
searches.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Iterator, Sequence

import structlog

from smilescope.config import settings
from smilescope.exceptions import FingerprintParameterError
from smilescope.parser import ensure_molecule
from smilescope.types import Molecule

logger = structlog.get_logger()

FNV_OFFSET_BASIS: Final[int] = 0x811C9DC5
FNV_PRIME: Final[int] = 0x01000193
_MASK_32: Final[int] = 0xFFFFFFFF

# Multiplier mixing bond order into a neighbour identifier
_BOND_ORDER_SALT: Final[int] = 7


def fnv1a_32(text: str) -> int:
    """32-bit FNV-1a hash of a string.
    
    Args:
        text: String to hash (hashed code point by code point).
    
    Returns:
        Unsigned 32-bit hash.
    
    Example:
        >>> fnv1a_32("")
        2166136261
    """
    h = FNV_OFFSET_BASIS
    for char in text:
        h ^= ord(char)
        h = (h * FNV_PRIME) & _MASK_32
    return h


@dataclass(frozen=True, slots=True)
class Fingerprint:
    """Fixed-length binary fingerprint.
    
    Attributes:
        bits: Tuple of 0/1 values.
    """
    
    bits: tuple[int, ...]
    
    @classmethod
    def from_bits(cls, bits: Sequence[int]) -> Fingerprint:
        """Build from any sequence of truthy/falsy values."""
        return cls(tuple(1 if b else 0 for b in bits))
    
    @property
    def n_bits(self) -> int:
        return len(self.bits)
    
    @property
    def on_bits(self) -> tuple[int, ...]:
        """Indices of set bits in ascending order."""
        return tuple(i for i, b in enumerate(self.bits) if b)
    
    def count(self) -> int:
        """Number of set bits."""
        return sum(self.bits)
    
    def to_list(self) -> list[int]:
        return list(self.bits)
    
    def __len__(self) -> int:
        return len(self.bits)
    
    def __iter__(self) -> Iterator[int]:
        return iter(self.bits)
    
    def __getitem__(self, idx: int) -> int:
        return self.bits[idx]


def _initial_identifiers(mol: Molecule) -> list[int]:
    return [
        fnv1a_32(f"{atom.symbol}:{mol.degree(atom.idx)}:{1 if atom.is_aromatic else 0}")
        for atom in mol.atoms
    ]


def morgan_fingerprint(
    mol: Molecule | str,
    radius: int | None = None,
    n_bits: int | None = None,
) -> Fingerprint:
    """Compute a Morgan-style circular fingerprint.
    
    Args:
        mol: Molecule or SMILES string.
        radius: Number of neighbourhood expansions (default
            ``settings.fingerprint_radius``, i.e. 2).
        n_bits: Fingerprint length (default ``settings.fingerprint_bits``,
            i.e. 128).
    
    Returns:
        Fingerprint of length ``n_bits``.
    
    Raises:
        FingerprintParameterError: If radius is negative or n_bits is not
            positive.
    
    Example:
        >>> fp = morgan_fingerprint("CCO", radius=2, n_bits=64)
        >>> len(fp)
        64
    """
    if radius is None:
        radius = settings.fingerprint_radius
    if n_bits is None:
        n_bits = settings.fingerprint_bits
    if radius < 0:
        raise FingerprintParameterError("radius", radius, ">= 0")
    if n_bits <= 0:
        raise FingerprintParameterError("n_bits", n_bits, "> 0")
    
    mol = ensure_molecule(mol)
    bits = [0] * n_bits
    
    identifiers = _initial_identifiers(mol)
    for ident in identifiers:
        bits[ident % n_bits] = 1
    
    for r in range(1, radius + 1):
        next_ids: list[int] = []
        for atom in mol.atoms:
            neighbor_ids = sorted(
                identifiers[bond.other_atom(atom.idx)] + bond.order * _BOND_ORDER_SALT
                for bond in mol.get_bonds(atom.idx)
            )
            key = f"{identifiers[atom.idx]}|{','.join(map(str, neighbor_ids))}|r{r}"
            ident = fnv1a_32(key)
            bits[ident % n_bits] = 1
            next_ids.append(ident)
        identifiers = next_ids
    
    fp = Fingerprint(tuple(bits))
    logger.debug(
        "fingerprint_computed",
        num_atoms=mol.num_atoms,
        radius=radius,
        n_bits=n_bits,
        on_bits=fp.count(),
    )
    return fp
