"""
Core molecular data types.

This module defines the immutable data structures for representing parsed
molecules: Atom, Bond and Molecule. A Molecule is an arena of atoms addressed
by integer index, with bonds stored as index pairs, so rings need no
back-pointers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from smilescope.hydrogens import hydrogen_count, implicit_hydrogens


@dataclass(frozen=True, slots=True)
class Bond:
    """Represents a chemical bond between two atoms.
    
    Attributes:
        idx: Index of this bond in the molecule.
        atom1_idx: Index of the first atom.
        atom2_idx: Index of the second atom.
        order: Bond order (1=single, 2=double, 3=triple). Aromatic bonds
            are recorded with order 1.
        is_aromatic: True for an explicit ``:`` bond, or an implicit bond
            between two aromatic atoms.
        is_explicit: Whether a bond symbol was written in the SMILES.
    """
    
    idx: int
    atom1_idx: int
    atom2_idx: int
    order: int = 1
    is_aromatic: bool = False
    is_explicit: bool = False
    
    def other_atom(self, atom_idx: int) -> int:
        """Get the index of the atom on the other end of this bond.
        
        Args:
            atom_idx: Index of one atom in the bond.
        
        Returns:
            Index of the other atom.
        
        Raises:
            ValueError: If atom_idx is not part of this bond.
        """
        if atom_idx == self.atom1_idx:
            return self.atom2_idx
        if atom_idx == self.atom2_idx:
            return self.atom1_idx
        raise ValueError(f"Atom {atom_idx} not in bond {self.idx}")
    
    def __contains__(self, atom_idx: int) -> bool:
        """Check if atom is part of this bond."""
        return atom_idx in (self.atom1_idx, self.atom2_idx)


@dataclass(frozen=True, slots=True)
class Atom:
    """Represents an atom in a molecule.
    
    Attributes:
        idx: Index of this atom, in first-seen order of the SMILES string.
        symbol: Element symbol in title case (e.g., "C", "Cl"), or "*" for
            an unresolvable bracket atom.
        is_aromatic: Whether the atom was written in lowercase.
        is_bracket: Whether the atom was written as ``[...]``.
        explicit_hydrogens: Hydrogen count written inside the brackets, or
            None when absent or for organic-subset atoms.
        charge: Formal charge (bracket atoms only).
        isotope: Mass number, or None for natural abundance.
        chirality: Tetrahedral marker ('@' or '@@').
        atom_class: Atom class number from ``[C:1]`` notation.
    """
    
    idx: int
    symbol: str
    is_aromatic: bool = False
    is_bracket: bool = False
    explicit_hydrogens: int | None = None
    charge: int = 0
    isotope: int | None = None
    chirality: str | None = None
    atom_class: int | None = None


@dataclass(frozen=True)
class Molecule:
    """Represents a parsed molecular graph.
    
    Instances are immutable; every descriptor is a read-only view over them.
    
    Attributes:
        atoms: Atoms in first-seen order.
        bonds: Bonds in creation order.
        ring_closure_count: Number of ring-closure pairs matched while parsing.
        smiles: The SMILES string the molecule was parsed from, if any.
    
    Example:
        >>> mol = parse("CCO")
        >>> len(mol), mol.num_bonds
        (3, 2)
    """
    
    atoms: tuple[Atom, ...] = ()
    bonds: tuple[Bond, ...] = ()
    ring_closure_count: int = 0
    smiles: str | None = None
    
    _adjacency: tuple[tuple[int, ...], ...] = field(
        init=False, repr=False, compare=False, default=()
    )
    
    def __post_init__(self) -> None:
        n = len(self.atoms)
        adjacency: list[list[int]] = [[] for _ in range(n)]
        for bond in self.bonds:
            if not (0 <= bond.atom1_idx < n and 0 <= bond.atom2_idx < n):
                raise IndexError(
                    f"Atom index out of bounds: {bond.atom1_idx}, {bond.atom2_idx}"
                )
            adjacency[bond.atom1_idx].append(bond.idx)
            adjacency[bond.atom2_idx].append(bond.idx)
        object.__setattr__(self, "_adjacency", tuple(tuple(b) for b in adjacency))
    
    def __len__(self) -> int:
        """Return number of atoms."""
        return len(self.atoms)
    
    def __iter__(self) -> Iterator[Atom]:
        """Iterate over atoms."""
        return iter(self.atoms)
    
    def __getitem__(self, idx: int) -> Atom:
        """Get atom by index."""
        return self.atoms[idx]
    
    @property
    def num_atoms(self) -> int:
        """Number of atoms in the molecule."""
        return len(self.atoms)
    
    @property
    def num_bonds(self) -> int:
        """Number of bonds in the molecule."""
        return len(self.bonds)
    
    def bond_indices(self, atom_idx: int) -> tuple[int, ...]:
        """Indices of bonds incident to an atom."""
        return self._adjacency[atom_idx]
    
    def get_bonds(self, atom_idx: int) -> Iterator[Bond]:
        """Iterate over bonds connected to an atom."""
        for bond_idx in self._adjacency[atom_idx]:
            yield self.bonds[bond_idx]
    
    def neighbors(self, atom_idx: int) -> Iterator[int]:
        """Iterate over indices of atoms bonded to an atom.
        
        Parallel bonds yield the same neighbor more than once.
        """
        for bond in self.get_bonds(atom_idx):
            yield bond.other_atom(atom_idx)
    
    def degree(self, atom_idx: int) -> int:
        """Number of bonds incident to an atom (heavy-atom degree)."""
        return len(self._adjacency[atom_idx])
    
    def bond_order_sum(self, atom_idx: int) -> int:
        """Sum of the orders of bonds incident to an atom."""
        return sum(bond.order for bond in self.get_bonds(atom_idx))
    
    def implicit_hydrogens(self, atom_idx: int) -> int:
        """Implicit hydrogen count of an atom (0 for bracket atoms)."""
        atom = self.atoms[atom_idx]
        if atom.is_bracket:
            return 0
        return implicit_hydrogens(atom.symbol, atom.is_aromatic, self.bond_order_sum(atom_idx))
    
    def hydrogen_count(self, atom_idx: int) -> int:
        """Attached hydrogen count: bracket annotation or inferred implicit H."""
        return hydrogen_count(self.atoms[atom_idx], self.bond_order_sum(atom_idx))
    
    def get_bond_between(self, atom1_idx: int, atom2_idx: int) -> Bond | None:
        """Find the first bond between two atoms, or None."""
        for bond in self.get_bonds(atom1_idx):
            if bond.other_atom(atom1_idx) == atom2_idx:
                return bond
        return None
    
    def connected_components(self) -> list[list[int]]:
        """Find connected components in the molecule.
        
        Returns:
            List of components, each being a sorted list of atom indices.
        """
        visited: set[int] = set()
        components: list[list[int]] = []
        
        for start in range(len(self.atoms)):
            if start in visited:
                continue
            
            component: list[int] = []
            stack = [start]
            visited.add(start)
            
            while stack:
                atom_idx = stack.pop()
                component.append(atom_idx)
                
                for neighbor in self.neighbors(atom_idx):
                    if neighbor not in visited:
                        visited.add(neighbor)
                        stack.append(neighbor)
            
            components.append(sorted(component))
        
        return components
    
    @property
    def is_connected(self) -> bool:
        """Check if molecule is a single connected component."""
        return len(self.connected_components()) <= 1
    
    def to_dict(self) -> dict[str, Any]:
        """Plain structure for JSON responses.
        
        Returns:
            ``{"atoms": [...], "bonds": [...], "ring_closures": int}`` where
            each atom carries its index, element, aromatic flag and hydrogen
            counts, and each bond its endpoints and order.
        """
        atoms = []
        for atom in self.atoms:
            atoms.append({
                "index": atom.idx,
                "element": atom.symbol,
                "aromatic": atom.is_aromatic,
                "bracket": atom.is_bracket,
                "implicit_hydrogens": self.implicit_hydrogens(atom.idx),
                "hydrogens": self.hydrogen_count(atom.idx),
                "charge": atom.charge,
            })
        bonds = [
            {
                "from": bond.atom1_idx,
                "to": bond.atom2_idx,
                "order": bond.order,
                "aromatic": bond.is_aromatic,
            }
            for bond in self.bonds
        ]
        return {"atoms": atoms, "bonds": bonds, "ring_closures": self.ring_closure_count}
