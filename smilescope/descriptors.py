"""
Molecular descriptors.

Pure functions over a parsed Molecule: element and bond tallies, molecular
formula (Hill order), molecular weight, hydrogen-bond donors and acceptors,
rotatable bonds, topological polar surface area (TPSA) and an estimated logP.
Every function also accepts a SMILES string and parses it first.

References:
    - TPSA atom contributions: Ertl et al., J. Med. Chem. 43, 3714-3717 (2000)
    - logP atom contributions (simplified): Wildman & Crippen,
      J. Chem. Inf. Comput. Sci. 39, 868-873 (1999)

The logP estimate is accurate to roughly +/-1-2 log units and must not be
treated as an exact value.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Final, Iterator

from smilescope.config import settings
from smilescope.elements import HYDROGEN_WEIGHT, atomic_weight
from smilescope.parser import ensure_molecule
from smilescope.rings import ring_bond_indices
from smilescope.types import Molecule

MoleculeLike = Molecule | str

_POLAR_ELEMENTS: Final[frozenset[str]] = frozenset({"N", "O"})

_HALOGEN_LOGP: Final[dict[str, float]] = {
    "F": 0.375,
    "Cl": 0.530,
    "Br": 0.876,
    "I": 1.296,
}


@dataclass(frozen=True, slots=True)
class AtomEnvironment:
    """Local features of one atom used by the additive descriptors.
    
    Attributes:
        idx: Atom index.
        symbol: Element symbol.
        is_aromatic: Aromatic flag.
        degree: Number of incident bonds.
        bond_order_sum: Sum of incident bond orders.
        hydrogens: Attached hydrogen count (implicit or bracket-explicit).
    """
    
    idx: int
    symbol: str
    is_aromatic: bool
    degree: int
    bond_order_sum: int
    hydrogens: int


def atom_environments(mol: Molecule) -> Iterator[AtomEnvironment]:
    """Yield the local environment of every atom, in index order."""
    for atom in mol.atoms:
        bond_sum = mol.bond_order_sum(atom.idx)
        yield AtomEnvironment(
            idx=atom.idx,
            symbol=atom.symbol,
            is_aromatic=atom.is_aromatic,
            degree=mol.degree(atom.idx),
            bond_order_sum=bond_sum,
            hydrogens=mol.hydrogen_count(atom.idx),
        )


# ---------------------------------------------------------------------------
# Tallies and formula
# ---------------------------------------------------------------------------

def atom_count(mol: MoleculeLike) -> dict[str, int]:
    """Count atoms by element, hydrogens included.
    
    Hydrogens are the sum of implicit hydrogens of organic-subset atoms,
    explicit hydrogens of bracket atoms, and hydrogen atoms written as atoms.
    
    Args:
        mol: Molecule or SMILES string.
    
    Returns:
        Mapping of element symbol to count; "H" only present if non-zero.
    
    Example:
        >>> atom_count("CCO")
        {'C': 2, 'O': 1, 'H': 6}
    """
    mol = ensure_molecule(mol)
    counts: dict[str, int] = {}
    total_h = 0
    
    for atom in mol.atoms:
        counts[atom.symbol] = counts.get(atom.symbol, 0) + 1
        total_h += mol.hydrogen_count(atom.idx)
    
    if total_h > 0:
        counts["H"] = counts.get("H", 0) + total_h
    return counts


def _format_count(symbol: str, count: int) -> str:
    return symbol + (str(count) if count > 1 else "")


def molecular_formula(mol: MoleculeLike) -> str:
    """Molecular formula in Hill order.
    
    Carbon first, then hydrogen, then the remaining elements alphabetically.
    Formulas without carbon list every element alphabetically, hydrogen
    included.
    
    Example:
        >>> molecular_formula("CC(=O)Oc1ccccc1C(=O)O")
        'C9H8O4'
    """
    counts = atom_count(mol)
    
    if "C" in counts:
        order = ["C"]
        if "H" in counts:
            order.append("H")
        order.extend(sorted(el for el in counts if el not in ("C", "H")))
    else:
        order = sorted(counts)
    
    return "".join(_format_count(el, counts[el]) for el in order)


@dataclass(frozen=True, slots=True)
class BondTally:
    """Bond counts by type."""
    
    single: int = 0
    double: int = 0
    triple: int = 0
    aromatic: int = 0
    
    @property
    def total(self) -> int:
        return self.single + self.double + self.triple + self.aromatic
    
    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def bond_count(mol: MoleculeLike) -> BondTally:
    """Count bonds by type.
    
    A bond is aromatic if written as ``:`` or if it joins two aromatic atoms
    without an explicit bond symbol.
    
    Example:
        >>> bond_count("C=C")
        BondTally(single=0, double=1, triple=0, aromatic=0)
    """
    mol = ensure_molecule(mol)
    single = double = triple = aromatic = 0
    
    for bond in mol.bonds:
        if bond.is_aromatic:
            aromatic += 1
        elif bond.order == 2:
            double += 1
        elif bond.order == 3:
            triple += 1
        else:
            single += 1
    
    return BondTally(single=single, double=double, triple=triple, aromatic=aromatic)


def molecular_weight(mol: MoleculeLike, precision: int | None = None) -> float:
    """Average molecular weight in g/mol.
    
    Sums the standard atomic weight of every atom plus the weight of its
    attached hydrogens. Unknown elements contribute 0.
    
    Args:
        mol: Molecule or SMILES string.
        precision: Decimal places to round to (default
            ``settings.weight_precision``, i.e. 3).
    
    Example:
        >>> molecular_weight("O")
        18.015
    """
    mol = ensure_molecule(mol)
    if precision is None:
        precision = settings.weight_precision
    
    weight = 0.0
    for atom in mol.atoms:
        weight += atomic_weight(atom.symbol)
        weight += mol.hydrogen_count(atom.idx) * HYDROGEN_WEIGHT
    
    return round(weight, precision)


# ---------------------------------------------------------------------------
# Drug-likeness sub-descriptors
# ---------------------------------------------------------------------------

def count_hbd(mol: MoleculeLike) -> int:
    """Count hydrogen-bond donors: N and O atoms carrying at least one H.
    
    Counts groups, not individual hydrogens (an NH2 counts once).
    """
    mol = ensure_molecule(mol)
    return sum(
        1 for env in atom_environments(mol)
        if env.symbol in _POLAR_ELEMENTS and env.hydrogens > 0
    )


def count_hba(mol: MoleculeLike) -> int:
    """Count hydrogen-bond acceptors: every N and O atom."""
    mol = ensure_molecule(mol)
    return sum(1 for atom in mol.atoms if atom.symbol in _POLAR_ELEMENTS)


def count_rotatable_bonds(mol: MoleculeLike) -> int:
    """Count rotatable bonds.
    
    A bond is rotatable if it has order 1, is not a ring bond and both of
    its atoms have degree > 1. Amide and ester bonds are included.
    
    Example:
        >>> count_rotatable_bonds("CCCC")
        1
    """
    mol = ensure_molecule(mol)
    ring_bonds = ring_bond_indices(mol)
    
    count = 0
    for bond in mol.bonds:
        if bond.order != 1 or bond.idx in ring_bonds:
            continue
        if mol.degree(bond.atom1_idx) <= 1 or mol.degree(bond.atom2_idx) <= 1:
            continue
        count += 1
    return count


def _tpsa_contribution(env: AtomEnvironment) -> float:
    h = env.hydrogens
    
    if env.symbol == "O":
        if h > 0:
            return 20.23    # -OH (alcohol, phenol, carboxyl OH)
        if env.degree <= 1:
            return 17.07    # carbonyl O
        if env.is_aromatic:
            return 13.14    # furan-type O
        return 9.23         # ether / ester O
    
    if env.symbol == "N":
        if env.is_aromatic and h > 0:
            return 15.79    # pyrrole-type NH
        if env.is_aromatic:
            return 12.89    # pyridine-type N
        if h >= 2:
            return 26.02    # -NH2
        if h == 1:
            return 17.07    # -NH-
        return 3.24         # tertiary N
    
    if env.symbol == "S":
        return 38.80 if h > 0 else 25.30
    
    if env.symbol == "P":
        return 40.74
    
    return 0.0


def estimate_tpsa(mol: MoleculeLike) -> float:
    """Estimate topological polar surface area in square angstroms.
    
    Only N, O, S and P atoms contribute. Result is rounded to 1 decimal.
    
    Example:
        >>> estimate_tpsa("CC(=O)Oc1ccccc1C(=O)O")
        63.6
    """
    mol = ensure_molecule(mol)
    tpsa = sum(_tpsa_contribution(env) for env in atom_environments(mol))
    return round(tpsa, 1)


def _logp_contribution(env: AtomEnvironment) -> float:
    h = env.hydrogens
    bs = env.bond_order_sum
    
    if env.symbol == "C":
        if env.is_aromatic:
            return 0.355
        if bs >= 4 or env.degree < bs:
            return 0.050    # sp2 / sp
        return 0.175        # sp3
    
    if env.symbol == "O":
        if h > 0:
            return -0.590
        if env.degree <= 1:
            return -0.520
        return -0.290
    
    if env.symbol == "N":
        if env.is_aromatic:
            return -0.550
        if h >= 2:
            return -0.960
        if h == 1:
            return -0.450
        return -0.080
    
    if env.symbol == "S":
        return 0.148 if h > 0 else 0.347
    
    if env.symbol == "P":
        return -0.228
    
    return _HALOGEN_LOGP.get(env.symbol, 0.0)


def estimate_logp(mol: MoleculeLike) -> float:
    """Estimate the octanol/water partition coefficient (logP).
    
    Simplified Crippen-style atom contributions keyed by element,
    aromaticity, bond-order sum and degree. Rounded to 2 decimals.
    """
    mol = ensure_molecule(mol)
    logp = sum(_logp_contribution(env) for env in atom_environments(mol))
    return round(logp, 2)


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Descriptors:
    """All descriptors of one molecule."""
    
    formula: str
    molecular_weight: float
    atom_counts: dict[str, int]
    bonds: BondTally
    hbd: int
    hba: int
    rotatable_bonds: int
    tpsa: float
    logp: float
    
    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["bonds"] = self.bonds.to_dict()
        return data


def compute_descriptors(mol: MoleculeLike) -> Descriptors:
    """Compute every descriptor of a molecule in one pass over a single parse.
    
    Example:
        >>> compute_descriptors("CCO").formula
        'C2H6O'
    """
    mol = ensure_molecule(mol)
    return Descriptors(
        formula=molecular_formula(mol),
        molecular_weight=molecular_weight(mol),
        atom_counts=atom_count(mol),
        bonds=bond_count(mol),
        hbd=count_hbd(mol),
        hba=count_hba(mol),
        rotatable_bonds=count_rotatable_bonds(mol),
        tpsa=estimate_tpsa(mol),
        logp=estimate_logp(mol),
    )
