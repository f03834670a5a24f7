"""
Structural validity check for SMILES strings.

The check is independent of graph construction and never raises: callers
decide whether to reject input before (or instead of) parsing it.
"""

from __future__ import annotations

from dataclasses import dataclass

from smilescope.tokenizer import AtomToken, FragmentSeparator, RingClosure, tokenize


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of :func:`validate`.
    
    Attributes:
        valid: True if the string passed every check.
        error: Human-readable reason for the first failed check.
    """
    
    valid: bool
    error: str | None = None
    
    def __bool__(self) -> bool:
        return self.valid


def _check_balance(smiles: str, open_char: str, close_char: str, what: str) -> str | None:
    depth = 0
    for char in smiles:
        if char == open_char:
            depth += 1
        elif char == close_char:
            depth -= 1
            if depth < 0:
                return f"Unmatched closing {what}"
    if depth != 0:
        return f"Unmatched opening {what}"
    return None


def validate(smiles: object) -> ValidationResult:
    """Check a SMILES string for structural validity.
    
    Checks, in order: non-empty string input, balanced parentheses, balanced
    brackets, every ring-closure label attached to an atom and paired, at
    least one atom. A ring label at the start of a component (``1CC1``,
    ``C.1CC1``) has no atom to attach to and fails the check.
    
    Args:
        smiles: Candidate SMILES string. Any other type fails the check.
    
    Returns:
        ValidationResult with the reason of the first failed check.
    
    Example:
        >>> validate("CC(O").error
        'Unmatched opening parenthesis'
    """
    if not isinstance(smiles, str) or not smiles:
        return ValidationResult(False, "Empty SMILES string")
    
    for open_char, close_char, what in (("(", ")", "parenthesis"), ("[", "]", "bracket")):
        error = _check_balance(smiles, open_char, close_char, what)
        if error is not None:
            return ValidationResult(False, error)
    
    tokens = tokenize(smiles)
    
    # dicts keep first-seen order for the error message
    open_labels: dict[int, None] = {}
    has_atom = False
    for tok in tokens:
        if isinstance(tok, AtomToken):
            has_atom = True
        elif isinstance(tok, FragmentSeparator):
            has_atom = False
        elif isinstance(tok, RingClosure):
            if not has_atom:
                return ValidationResult(False, f"Ring digit without preceding atom: {tok.label}")
            if tok.label in open_labels:
                del open_labels[tok.label]
            else:
                open_labels[tok.label] = None
    if open_labels:
        labels = ", ".join(str(label) for label in open_labels)
        return ValidationResult(False, f"Unclosed ring digit(s): {labels}")
    
    if not any(isinstance(tok, AtomToken) for tok in tokens):
        return ValidationResult(False, "No atoms found")
    
    return ValidationResult(True)


def is_valid(smiles: object) -> bool:
    """Shorthand for ``validate(smiles).valid``."""
    return validate(smiles).valid
