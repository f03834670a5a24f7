"""Test configuration and fixtures for smilescope tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def rdkit_chem():
    """RDKit's Chem module, used as a reference implementation.
    
    Tests requesting this fixture are skipped when RDKit is not installed.
    """
    return pytest.importorskip("rdkit.Chem")


@pytest.fixture
def simple_smiles() -> list[str]:
    """Basic valid SMILES strings for smoke testing."""
    return [
        "C",
        "CC",
        "CCC",
        "CCCC",
        "CCO",
        "C=C",
        "C#C",
        "C=O",
        "C#N",
    ]


@pytest.fixture
def aromatic_smiles() -> list[str]:
    """Aromatic SMILES strings."""
    return [
        "c1ccccc1",
        "c1ccncc1",
        "c1ccoc1",
        "c1ccsc1",
        "c1cc[nH]c1",
        "c1ccc2ccccc2c1",
    ]


@pytest.fixture
def ring_smiles() -> list[str]:
    """SMILES with ring closures."""
    return [
        "C1CC1",
        "C1CCC1",
        "C1CCCC1",
        "C1CCCCC1",
        "C1CC2CCCCC2C1",
        "C12CC1CC2",
    ]


@pytest.fixture
def drug_smiles() -> dict[str, str]:
    """Common drug molecules."""
    return {
        "aspirin": "CC(=O)Oc1ccccc1C(=O)O",
        "ibuprofen": "CC(C)Cc1ccc(cc1)C(C)C(=O)O",
        "caffeine": "CN1C=NC2=C1C(=O)N(C(=O)N2C)C",
        "paracetamol": "CC(=O)Nc1ccc(O)cc1",
    }


@pytest.fixture
def invalid_smiles() -> list[str]:
    """Structurally invalid SMILES strings."""
    return [
        "C1CC",
        "CC(O",
        "CC)O",
        "C[NH4+",
        "CC]",
        "()",
    ]
