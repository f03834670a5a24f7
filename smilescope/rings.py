"""
Ring membership via bridge finding.

A bond is a ring bond exactly when it is not a bridge, i.e. when removing it
leaves its endpoints connected. Bridges are found with Tarjan's low-link
algorithm in O(V+E). The depth-first search keeps its own stack, so long
chains and polymers cannot hit the interpreter recursion limit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smilescope.types import Molecule


def find_bridges(mol: "Molecule") -> set[int]:
    """Find bridge bonds of the molecular graph.
    
    Parallel bonds between the same pair of atoms are distinct edges, so
    neither of them is a bridge.
    
    Args:
        mol: Molecule to analyze.
    
    Returns:
        Set of bond indices that are bridges.
    
    Example:
        >>> sorted(find_bridges(parse("C1CC1C")))
        [3]
    """
    n = mol.num_atoms
    discovery: list[int] = [-1] * n
    low: list[int] = [0] * n
    bridges: set[int] = set()
    timer = 0
    
    for root in range(n):
        if discovery[root] != -1:
            continue
        
        discovery[root] = low[root] = timer
        timer += 1
        # Frames: (atom, bond used to reach it, iterator position)
        stack: list[list[int]] = [[root, -1, 0]]
        
        while stack:
            frame = stack[-1]
            node, parent_bond, pos = frame
            incident = mol.bond_indices(node)
            
            if pos < len(incident):
                frame[2] = pos + 1
                bond_idx = incident[pos]
                if bond_idx == parent_bond:
                    continue
                neighbor = mol.bonds[bond_idx].other_atom(node)
                if discovery[neighbor] == -1:
                    discovery[neighbor] = low[neighbor] = timer
                    timer += 1
                    stack.append([neighbor, bond_idx, 0])
                else:
                    low[node] = min(low[node], discovery[neighbor])
                continue
            
            stack.pop()
            if stack:
                parent = stack[-1][0]
                low[parent] = min(low[parent], low[node])
                if low[node] > discovery[parent]:
                    bridges.add(parent_bond)
    
    return bridges


def ring_bond_indices(mol: "Molecule") -> set[int]:
    """Indices of bonds that belong to at least one ring.
    
    Example:
        >>> len(ring_bond_indices(parse("c1ccccc1CC")))
        6
    """
    bridges = find_bridges(mol)
    return {bond.idx for bond in mol.bonds if bond.idx not in bridges}


def ring_atom_indices(mol: "Molecule") -> set[int]:
    """Indices of atoms that belong to at least one ring."""
    ring_atoms: set[int] = set()
    for bond_idx in ring_bond_indices(mol):
        bond = mol.bonds[bond_idx]
        ring_atoms.add(bond.atom1_idx)
        ring_atoms.add(bond.atom2_idx)
    return ring_atoms


def is_ring_bond(mol: "Molecule", bond_idx: int) -> bool:
    """Check if a single bond is in a ring."""
    return bond_idx not in find_bridges(mol)


def cyclomatic_number(mol: "Molecule") -> int:
    """Number of independent rings: E - V + C."""
    return mol.num_bonds - mol.num_atoms + len(mol.connected_components())
