"""
Smilescope - SMILES parsing, descriptors and fingerprints in pure Python.

Turns SMILES strings into immutable atom/bond graphs and computes
structural descriptors (formula, weight, TPSA, logP, ...) and Morgan-style
fingerprints for similarity search.

    >>> from smilescope import parse, molecular_formula, morgan_fingerprint
    >>> mol = parse("CCO")
    >>> molecular_formula(mol)
    'C2H6O'
    >>> len(morgan_fingerprint(mol))
    128

Submodules:
    smilescope.tokenizer   - SMILES tokens
    smilescope.validation  - Non-throwing structural validity check
    smilescope.rings       - Bridge-based ring membership
    smilescope.descriptors - Molecular descriptors
    smilescope.fingerprint - Circular fingerprints
    smilescope.similarity  - Tanimoto/cosine similarity and kNN search
"""

__version__ = "0.1.0"

# Core types
from smilescope.types import Atom, Bond, Molecule

# Tokenizing, validation and parsing
from smilescope.tokenizer import tokenize
from smilescope.validation import ValidationResult, is_valid, validate
from smilescope.parser import SmilesParser, parse

# Exceptions
from smilescope.exceptions import (
    ChemError,
    EmptyInputError,
    FingerprintLengthError,
    FingerprintParameterError,
    InputTypeError,
    ParseError,
    UnknownElementError,
)

# Configuration
from smilescope.config import Settings, settings

# Rings
from smilescope.rings import find_bridges, ring_atom_indices, ring_bond_indices

# Descriptors
from smilescope.descriptors import (
    BondTally,
    Descriptors,
    atom_count,
    bond_count,
    compute_descriptors,
    count_hba,
    count_hbd,
    count_rotatable_bonds,
    estimate_logp,
    estimate_tpsa,
    molecular_formula,
    molecular_weight,
)

# Fingerprints and similarity
from smilescope.fingerprint import Fingerprint, morgan_fingerprint
from smilescope.similarity import (
    FingerprintEntry,
    Neighbor,
    build_fingerprint_database,
    cosine_similarity,
    knn_search,
    tanimoto_similarity,
)

# Naive matching and balance
from smilescope.match import canonicalize, has_substructure
from smilescope.balance import BalanceResult, balance_check, sum_atom_counts

__all__ = [
    # Types
    "Atom", "Bond", "Molecule",
    # Parsing
    "tokenize", "validate", "is_valid", "ValidationResult", "parse", "SmilesParser",
    # Exceptions
    "ChemError", "ParseError", "EmptyInputError", "UnknownElementError",
    "InputTypeError", "FingerprintLengthError", "FingerprintParameterError",
    # Configuration
    "Settings", "settings",
    # Rings
    "find_bridges", "ring_bond_indices", "ring_atom_indices",
    # Descriptors
    "BondTally", "Descriptors", "atom_count", "bond_count", "compute_descriptors",
    "count_hba", "count_hbd", "count_rotatable_bonds", "estimate_logp",
    "estimate_tpsa", "molecular_formula", "molecular_weight",
    # Fingerprints
    "Fingerprint", "morgan_fingerprint", "FingerprintEntry", "Neighbor",
    "build_fingerprint_database", "cosine_similarity", "knn_search",
    "tanimoto_similarity",
    # Matching and balance
    "canonicalize", "has_substructure", "BalanceResult", "balance_check",
    "sum_atom_counts",
]
