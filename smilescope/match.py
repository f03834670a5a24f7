"""
Naive string-level matching.

These helpers work on normalised SMILES text, not on the molecular graph.
They are fast and dependency-free but only approximate: see
:func:`has_substructure` for the failure modes.
"""

from __future__ import annotations

from typing import Final

from smilescope.exceptions import InputTypeError

_STEREO_MARKS: Final[frozenset[str]] = frozenset("/\\@")
_AROMATIC_LOWER: Final[frozenset[str]] = frozenset("cnops")


def canonicalize(smiles: str) -> str:
    """Normalise a SMILES string for naive comparison.
    
    Removes stereochemistry marks (``/``, ``\\``, ``@``) and upper-cases the
    aromatic organic atoms ``c n o p s`` outside brackets. Bracket contents
    are copied unchanged apart from the removed ``@`` marks.
    
    This is not canonical SMILES: two spellings of the same molecule can
    normalise differently.
    
    Args:
        smiles: SMILES string.
    
    Returns:
        Normalised string.
    
    Raises:
        InputTypeError: If smiles is not a string.
    
    Example:
        >>> canonicalize("c1ccccc1")
        'C1CCCCC1'
        >>> canonicalize("F/C=C/F")
        'FC=CF'
    """
    if not isinstance(smiles, str):
        raise InputTypeError(smiles)
    
    out: list[str] = []
    in_bracket = False
    for char in smiles:
        if char in _STEREO_MARKS:
            continue
        if char == "[":
            in_bracket = True
        elif char == "]":
            in_bracket = False
        elif not in_bracket and char in _AROMATIC_LOWER:
            char = char.upper()
        out.append(char)
    return "".join(out)


def has_substructure(smiles: str, pattern: str) -> bool:
    """Check whether a pattern occurs in a SMILES string, textually.
    
    Both strings are normalised with :func:`canonicalize` and compared by
    substring containment.
    
    Warning:
        This is not graph matching. It gives false positives, e.g. the
        carboxylic acid pattern ``C(=O)O`` also matches esters, and false
        negatives whenever the same fragment is written in another order.
        Use a graph-based matcher such as RDKit for real substructure search.
    
    Example:
        >>> has_substructure("CC(=O)O", "C(=O)O")
        True
        >>> has_substructure("CCO", "N")
        False
    """
    return canonicalize(pattern) in canonicalize(smiles)
