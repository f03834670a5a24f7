"""
Atom balance between reactants and products.

Sums element counts (hydrogens included) over each side of a reaction and
compares them. This is the tally a reaction layer needs for a mass-balance
check; reaction-string parsing itself lives with the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from smilescope.descriptors import MoleculeLike, atom_count


def sum_atom_counts(molecules: Iterable[MoleculeLike]) -> dict[str, int]:
    """Sum element counts over several molecules.
    
    Example:
        >>> sum_atom_counts(["CC", "O"])
        {'C': 2, 'H': 8, 'O': 1}
    """
    totals: dict[str, int] = {}
    for mol in molecules:
        for element, count in atom_count(mol).items():
            totals[element] = totals.get(element, 0) + count
    return totals


@dataclass(frozen=True, slots=True)
class BalanceResult:
    """Outcome of an atom-balance check.
    
    Attributes:
        balanced: True if every element has the same count on both sides.
        reactant_atoms: Element counts over all reactants.
        product_atoms: Element counts over all products.
        difference: Products minus reactants, per element, non-zero entries
            only (sorted by element).
    """
    
    balanced: bool
    reactant_atoms: dict[str, int]
    product_atoms: dict[str, int]
    difference: dict[str, int]


def balance_check(
    reactants: Iterable[MoleculeLike],
    products: Iterable[MoleculeLike],
) -> BalanceResult:
    """Compare element counts of reactants and products.
    
    Example:
        >>> balance_check(["CC(=O)O", "OCC"], ["CC(=O)OCC", "O"]).balanced
        True
    """
    reactant_atoms = sum_atom_counts(reactants)
    product_atoms = sum_atom_counts(products)
    
    difference: dict[str, int] = {}
    for element in sorted(set(reactant_atoms) | set(product_atoms)):
        delta = product_atoms.get(element, 0) - reactant_atoms.get(element, 0)
        if delta:
            difference[element] = delta
    
    return BalanceResult(
        balanced=not difference,
        reactant_atoms=reactant_atoms,
        product_atoms=product_atoms,
        difference=difference,
    )
