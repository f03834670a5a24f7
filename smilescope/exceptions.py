"""
Custom exceptions for smilescope.

This module defines a hierarchy of exceptions so that calling layers can map
each failure kind to its own response instead of catching a generic error.
"""

from __future__ import annotations


class ChemError(Exception):
    """Base exception for all chemistry-related errors."""
    
    pass


class ParseError(ChemError):
    """Error during SMILES parsing.
    
    Attributes:
        position: Character position in the SMILES string where error occurred.
        smiles: The original SMILES string being parsed.
        message: Description of what went wrong.
    """
    
    def __init__(
        self,
        message: str,
        smiles: str | None = None,
        position: int | None = None,
    ) -> None:
        self.message = message
        self.smiles = smiles
        self.position = position
        
        # Build detailed error message
        parts = [message]
        if smiles and position is not None:
            parts.append(f"\n  {smiles}")
            parts.append(f"\n  {' ' * position}^")
        elif smiles:
            parts.append(f" in: {smiles}")
        
        super().__init__("".join(parts))


class EmptyInputError(ParseError):
    """The SMILES string is empty or contains only whitespace."""
    
    def __init__(self, smiles: str = "") -> None:
        super().__init__("Empty SMILES string", smiles or None)


class UnknownElementError(ParseError):
    """Atom whose element symbol cannot be resolved.
    
    Only raised by strict parsing; the default parser falls back to a
    best-effort symbol instead.
    
    Attributes:
        text: Atom text (bracket contents without the brackets).
    """
    
    def __init__(self, text: str, smiles: str | None = None, position: int | None = None) -> None:
        self.text = text
        super().__init__(f"Unknown element {text!r}", smiles, position)


class InputTypeError(ChemError, TypeError):
    """SMILES input is not a string."""
    
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"SMILES must be a str, got {type(value).__name__}")


class FingerprintLengthError(ChemError, ValueError):
    """Two fingerprints of different lengths were compared.
    
    Attributes:
        left: Length of the first fingerprint.
        right: Length of the second fingerprint.
    """
    
    def __init__(self, left: int, right: int) -> None:
        self.left = left
        self.right = right
        super().__init__(f"Fingerprint lengths differ: {left} != {right}")


class FingerprintParameterError(ChemError, ValueError):
    """Invalid fingerprint or search parameter (radius, length or k).
    
    Attributes:
        name: Parameter name.
        value: Rejected value.
    """
    
    def __init__(self, name: str, value: int, requirement: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must be {requirement}, got {value}")
