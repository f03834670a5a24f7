"""Tests for the valence model and hydrogen counts, comparing with RDKit."""

from __future__ import annotations

import pytest

from smilescope import parse
from smilescope.hydrogens import implicit_hydrogens


def total_hydrogens(smiles: str) -> int:
    mol = parse(smiles)
    return sum(mol.hydrogen_count(a.idx) for a in mol)


class TestImplicitHydrogens:
    """Test the valence table rule."""
    
    @pytest.mark.parametrize("symbol,aromatic,bond_sum,expected", [
        ("C", False, 0, 4),
        ("C", False, 1, 3),
        ("C", False, 4, 0),
        ("C", True, 2, 1),
        ("C", True, 3, 0),
        ("N", False, 1, 2),
        ("N", True, 2, 0),
        ("O", False, 1, 1),
        ("O", False, 3, 0),
        ("Cl", False, 1, 0),
        ("S", False, 0, 2),
    ])
    def test_rule(self, symbol, aromatic, bond_sum, expected):
        """H = max(0, valence - aromatic penalty - bond order sum)."""
        assert implicit_hydrogens(symbol, aromatic, bond_sum) == expected
    
    @pytest.mark.parametrize("symbol", ["Na", "Fe", "Xe", "*"])
    def test_outside_table(self, symbol: str):
        """Elements outside the valence table get no hydrogens."""
        assert implicit_hydrogens(symbol, False, 0) == 0


class TestMoleculeHydrogens:
    """Test hydrogen counts on parsed molecules."""
    
    @pytest.mark.parametrize("smiles,expected", [
        ("C", 4),
        ("CC", 6),
        ("O", 2),
        ("N", 3),
        ("C=C", 4),
        ("C#C", 2),
        ("CCO", 6),
        ("c1ccccc1", 6),
        ("c1ccncc1", 5),
        ("c1cc[nH]c1", 5),
    ])
    def test_total(self, smiles: str, expected: int):
        """Total hydrogens of common molecules."""
        assert total_hydrogens(smiles) == expected
    
    def test_bracket_suppresses_inference(self):
        """Bracket atoms carry only their written hydrogens."""
        mol = parse("[C]")
        assert mol.implicit_hydrogens(0) == 0
        assert mol.hydrogen_count(0) == 0
    
    def test_bracket_hydrogens_counted(self):
        """Bracket hydrogens count toward the total."""
        mol = parse("[NH4+]")
        assert mol.implicit_hydrogens(0) == 0
        assert mol.hydrogen_count(0) == 4
    
    def test_saturated_atom(self):
        """An over-bonded atom gets zero, never negative."""
        mol = parse("C(C)(C)(C)(C)C")
        assert mol.implicit_hydrogens(0) == 0


class TestAgainstRDKit:
    """Compare total hydrogen counts with RDKit."""
    
    @pytest.mark.parametrize("smiles", [
        "CCO",
        "CC(=O)O",
        "c1ccccc1",
        "c1ccncc1",
        "c1cc[nH]c1",
        "c1ccsc1",
        "c1ccoc1",
        "Cn1cccc1",
        "c1ccc2ccccc2c1",
        "CC(C)Cc1ccc(cc1)C(C)C(=O)O",
        "CN1C=NC2=C1C(=O)N(C(=O)N2C)C",
        "ClCCBr",
        "C#N",
    ])
    def test_total_hydrogens(self, smiles: str, rdkit_chem):
        """Total hydrogens match RDKit."""
        ref = rdkit_chem.MolFromSmiles(smiles)
        expected = sum(a.GetTotalNumHs() for a in ref.GetAtoms())
        assert total_hydrogens(smiles) == expected
