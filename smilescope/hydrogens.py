"""
Valence model and implicit hydrogen inference.

Organic-subset atoms get their hydrogens from the standard valence table;
bracket atoms carry exactly the hydrogens written inside the brackets.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from smilescope.elements import get_valence

if TYPE_CHECKING:
    from smilescope.types import Atom


def implicit_hydrogens(symbol: str, aromatic: bool, bond_order_sum: int) -> int:
    """Infer the implicit hydrogen count of an organic-subset atom.
    
    An aromatic atom loses one unit of valence to ring delocalization, so
    aromatic bonds can be counted with order 1.
    
    Args:
        symbol: Element symbol.
        aromatic: Whether the atom is aromatic.
        bond_order_sum: Sum of the orders of the atom's bonds.
    
    Returns:
        ``max(0, valence - bond_order_sum)``; 0 for elements outside the
        valence table.
    
    Example:
        >>> implicit_hydrogens("C", False, 1)
        3
        >>> implicit_hydrogens("C", True, 2)
        1
    """
    valence = get_valence(symbol)
    if valence is None:
        return 0
    effective = valence - 1 if aromatic else valence
    return max(0, effective - bond_order_sum)


def hydrogen_count(atom: "Atom", bond_order_sum: int) -> int:
    """Total hydrogens attached to an atom.
    
    Bracket notation suppresses inference: a bracket atom has exactly its
    written hydrogen count (0 if none).
    """
    if atom.is_bracket:
        return atom.explicit_hydrogens or 0
    return implicit_hydrogens(atom.symbol, atom.is_aromatic, bond_order_sum)
