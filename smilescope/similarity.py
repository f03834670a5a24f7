"""
Fingerprint similarity and nearest-neighbour search.

Tanimoto (Jaccard) and cosine similarity over equal-length binary
fingerprints, plus a brute-force k-nearest-neighbour search by Tanimoto
similarity.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Union

import structlog

from smilescope.config import settings
from smilescope.exceptions import FingerprintLengthError, FingerprintParameterError
from smilescope.fingerprint import Fingerprint, morgan_fingerprint

logger = structlog.get_logger()

BitVector = Union[Fingerprint, Sequence[int]]


def _check_lengths(fp1: BitVector, fp2: BitVector) -> None:
    if len(fp1) != len(fp2):
        raise FingerprintLengthError(len(fp1), len(fp2))


def tanimoto_similarity(fp1: BitVector, fp2: BitVector) -> float:
    """Tanimoto similarity |A and B| / |A or B| of two binary fingerprints.
    
    Two empty fingerprints have similarity 0.
    
    Raises:
        FingerprintLengthError: If the fingerprints differ in length.
    
    Example:
        >>> tanimoto_similarity([1, 1, 0, 0], [1, 0, 1, 0])
        0.3333333333333333
    """
    _check_lengths(fp1, fp2)
    intersection = 0
    union = 0
    for a, b in zip(fp1, fp2):
        if a and b:
            intersection += 1
        if a or b:
            union += 1
    
    if union == 0:
        return 0.0
    return intersection / union


def cosine_similarity(fp1: BitVector, fp2: BitVector) -> float:
    """Cosine similarity of two fingerprints.
    
    Returns 0 if either fingerprint has zero magnitude.
    
    Raises:
        FingerprintLengthError: If the fingerprints differ in length.
    """
    _check_lengths(fp1, fp2)
    dot = 0.0
    norm1 = 0.0
    norm2 = 0.0
    for a, b in zip(fp1, fp2):
        dot += a * b
        norm1 += a * a
        norm2 += b * b
    
    denom = math.sqrt(norm1) * math.sqrt(norm2)
    if denom == 0:
        return 0.0
    return dot / denom


@dataclass(frozen=True, slots=True)
class FingerprintEntry:
    """A database record: caller-chosen identifier plus its fingerprint."""
    
    id: str
    fingerprint: Fingerprint


@dataclass(frozen=True, slots=True)
class Neighbor:
    """One kNN search result."""
    
    id: str
    similarity: float


def build_fingerprint_database(
    items: Iterable[tuple[str, str]],
    radius: int | None = None,
    n_bits: int | None = None,
) -> list[FingerprintEntry]:
    """Fingerprint a collection of ``(id, smiles)`` pairs.
    
    Args:
        items: Pairs of identifier and SMILES string.
        radius: Fingerprint radius (see :func:`morgan_fingerprint`).
        n_bits: Fingerprint length (see :func:`morgan_fingerprint`).
    
    Returns:
        Entries in input order.
    """
    return [
        FingerprintEntry(id=item_id, fingerprint=morgan_fingerprint(smiles, radius, n_bits))
        for item_id, smiles in items
    ]


def knn_search(
    query: BitVector,
    database: Iterable[FingerprintEntry | tuple[str, BitVector]],
    k: int | None = None,
) -> list[Neighbor]:
    """Find the k most similar database entries by Tanimoto similarity.
    
    Results are sorted by descending similarity. Ties keep database order.
    
    Args:
        query: Query fingerprint.
        database: Entries, or ``(id, fingerprint)`` pairs.
        k: Number of neighbours to return (default ``settings.knn_k``,
            i.e. 5). Fewer are returned if the database is smaller.
    
    Returns:
        Up to k Neighbor results.
    
    Raises:
        FingerprintParameterError: If k is not positive.
        FingerprintLengthError: If any entry's fingerprint length differs
            from the query's.
    """
    if k is None:
        k = settings.knn_k
    if k <= 0:
        raise FingerprintParameterError("k", k, "> 0")
    
    scored: list[Neighbor] = []
    for entry in database:
        if isinstance(entry, FingerprintEntry):
            entry_id, fp = entry.id, entry.fingerprint
        else:
            entry_id, fp = entry
        scored.append(Neighbor(id=entry_id, similarity=tanimoto_similarity(query, fp)))
    
    # sorted() is stable, so equal scores keep database order
    scored = sorted(scored, key=lambda n: n.similarity, reverse=True)
    logger.debug("knn_search_completed", database_size=len(scored), k=k)
    return scored[:k]
