"""Tests for the SMILES tokenizer."""

from __future__ import annotations

import pytest

from smilescope.tokenizer import (
    AtomToken,
    BondToken,
    BranchClose,
    BranchOpen,
    FragmentSeparator,
    RingClosure,
    iter_tokens,
    tokenize,
)


def atom_texts(smiles: str) -> list[str]:
    """Texts of all atom tokens of a SMILES string."""
    return [t.text for t in tokenize(smiles) if isinstance(t, AtomToken)]


class TestAtomTokens:
    """Test atom token recognition."""
    
    def test_organic_atoms(self):
        """Each organic-subset letter is one atom token."""
        assert atom_texts("CCO") == ["C", "C", "O"]
    
    @pytest.mark.parametrize("smiles,expected", [
        ("CCl", ["C", "Cl"]),
        ("BrC", ["Br", "C"]),
        ("ClCCBr", ["Cl", "C", "C", "Br"]),
    ])
    def test_two_letter_organic_greedy(self, smiles: str, expected: list[str]):
        """Cl and Br are matched before single letters."""
        assert atom_texts(smiles) == expected
    
    def test_bracket_atom_keeps_contents(self):
        """Bracket contents are kept verbatim without the brackets."""
        tokens = tokenize("[NH4+]")
        assert tokens == [AtomToken("NH4+", bracket=True, position=0)]
    
    def test_unclosed_bracket_takes_rest(self):
        """An unclosed bracket consumes the rest of the string."""
        tokens = tokenize("C[NH4+")
        assert len(tokens) == 2
        assert tokens[1].text == "NH4+"
        assert tokens[1].bracket
    
    def test_aromatic_atoms(self):
        """Lowercase aromatic letters are atom tokens."""
        assert atom_texts("c1ccccc1") == ["c"] * 6
    
    def test_positions(self):
        """Tokens record their offset in the string."""
        tokens = tokenize("C(=O)O")
        assert [t.position for t in tokens] == [0, 1, 2, 3, 4, 5]


class TestStructureTokens:
    """Test bonds, branches, rings and separators."""
    
    def test_token_sequence(self):
        """Branches and bonds become typed tokens."""
        tokens = tokenize("C(=O)O")
        assert [type(t) for t in tokens] == [
            AtomToken, BranchOpen, BondToken, AtomToken, BranchClose, AtomToken,
        ]
        assert tokens[2].symbol == "="
    
    @pytest.mark.parametrize("symbol", ["-", "=", "#", ":"])
    def test_bond_symbols(self, symbol: str):
        """All bond symbols are recognised."""
        tokens = tokenize(f"C{symbol}C")
        assert isinstance(tokens[1], BondToken)
        assert tokens[1].symbol == symbol
    
    def test_ring_digits(self):
        """Ring digits become ring-closure tokens."""
        labels = [t.label for t in tokenize("C1CC2CC1C2") if isinstance(t, RingClosure)]
        assert labels == [1, 2, 1, 2]
    
    @pytest.mark.parametrize("smiles,label", [
        ("C%12CC%12", 12),
        ("C%(123)CC%(123)", 123),
    ])
    def test_percent_labels(self, smiles: str, label: int):
        """Two-digit and parenthesised ring labels."""
        labels = [t.label for t in tokenize(smiles) if isinstance(t, RingClosure)]
        assert labels == [label, label]
    
    def test_malformed_percent_skipped(self):
        """A '%' without a valid label is ignored."""
        tokens = tokenize("C%C")
        assert not any(isinstance(t, RingClosure) for t in tokens)
        assert atom_texts("C%C") == ["C", "C"]
    
    def test_dot_separator(self):
        """Dots become fragment separators."""
        tokens = tokenize("[Na+].[Cl-]")
        assert isinstance(tokens[1], FragmentSeparator)


class TestSkippedCharacters:
    """Test that unrecognised characters are skipped."""
    
    def test_stereo_bonds_skipped(self):
        """Stereo bond markers produce no tokens."""
        assert len(tokenize(r"F/C=C\F")) == 5
    
    def test_empty_string(self):
        """Empty input yields no tokens."""
        assert tokenize("") == []
    
    def test_iter_tokens_is_lazy(self):
        """iter_tokens yields the same tokens as tokenize."""
        assert list(iter_tokens("CC(C)O")) == tokenize("CC(C)O")


class TestNonAsciiDigits:
    """Test that only ASCII digits count as digits."""
    
    @pytest.mark.parametrize("smiles", ["C²C", "C١C", "C%²²C", "C%(¹²)C"])
    def test_unicode_digits_skipped(self, smiles: str):
        """Superscript and other-script digits are skipped, never raised on."""
        tokens = tokenize(smiles)
        assert not any(isinstance(t, RingClosure) for t in tokens)
        assert atom_texts(smiles) == ["C", "C"]
    
    def test_bracket_keeps_unicode_digit(self):
        """Bracket contents are kept verbatim."""
        assert atom_texts("[²C]") == ["²C"]
