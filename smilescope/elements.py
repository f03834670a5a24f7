"""
Chemical elements and constants.

This module provides element data, standard atomic weights and the valence
table used for implicit hydrogen inference. All tables are immutable,
process-wide constants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Final, FrozenSet


@dataclass(frozen=True, slots=True)
class Element:
    """Immutable element data.
    
    Attributes:
        atomic_number: Atomic number (proton count).
        symbol: Element symbol (e.g., "C", "Cl").
        name: Full element name.
        atomic_weight: Standard atomic weight, or None where IUPAC gives none.
    """
    
    atomic_number: int
    symbol: str
    name: str
    atomic_weight: float | None = None
    
    # Class-level registry
    _by_symbol: ClassVar[dict[str, "Element"]] = {}
    _by_number: ClassVar[dict[int, "Element"]] = {}
    
    def __post_init__(self) -> None:
        Element._by_symbol[self.symbol] = self
        Element._by_number[self.atomic_number] = self
    
    @classmethod
    def from_symbol(cls, symbol: str) -> "Element | None":
        """Look up element by its exact (title-case) symbol."""
        return cls._by_symbol.get(symbol)
    
    @classmethod
    def from_atomic_number(cls, num: int) -> "Element | None":
        """Look up element by atomic number."""
        return cls._by_number.get(num)


_ELEMENTS_DATA: Final[list[tuple[int, str, str, float | None]]] = [
    # (atomic_number, symbol, name, atomic_weight)
    (1, "H", "Hydrogen", 1.008),
    (2, "He", "Helium", 4.0026),
    (3, "Li", "Lithium", 6.94),
    (4, "Be", "Beryllium", 9.0122),
    (5, "B", "Boron", 10.81),
    (6, "C", "Carbon", 12.011),
    (7, "N", "Nitrogen", 14.007),
    (8, "O", "Oxygen", 15.999),
    (9, "F", "Fluorine", 18.998),
    (10, "Ne", "Neon", 20.180),
    (11, "Na", "Sodium", 22.990),
    (12, "Mg", "Magnesium", 24.305),
    (13, "Al", "Aluminum", 26.982),
    (14, "Si", "Silicon", 28.085),
    (15, "P", "Phosphorus", 30.974),
    (16, "S", "Sulfur", 32.065),
    (17, "Cl", "Chlorine", 35.453),
    (18, "Ar", "Argon", 39.948),
    (19, "K", "Potassium", 39.098),
    (20, "Ca", "Calcium", 40.078),
    (21, "Sc", "Scandium", 44.956),
    (22, "Ti", "Titanium", 47.867),
    (23, "V", "Vanadium", 50.942),
    (24, "Cr", "Chromium", 51.996),
    (25, "Mn", "Manganese", 54.938),
    (26, "Fe", "Iron", 55.845),
    (27, "Co", "Cobalt", 58.933),
    (28, "Ni", "Nickel", 58.693),
    (29, "Cu", "Copper", 63.546),
    (30, "Zn", "Zinc", 65.38),
    (31, "Ga", "Gallium", 69.723),
    (32, "Ge", "Germanium", 72.630),
    (33, "As", "Arsenic", 74.922),
    (34, "Se", "Selenium", 78.971),
    (35, "Br", "Bromine", 79.904),
    (36, "Kr", "Krypton", 83.798),
    (37, "Rb", "Rubidium", 85.468),
    (38, "Sr", "Strontium", 87.62),
    (39, "Y", "Yttrium", 88.906),
    (40, "Zr", "Zirconium", 91.224),
    (41, "Nb", "Niobium", 92.906),
    (42, "Mo", "Molybdenum", 95.95),
    (43, "Tc", "Technetium", None),
    (44, "Ru", "Ruthenium", 101.07),
    (45, "Rh", "Rhodium", 102.91),
    (46, "Pd", "Palladium", 106.42),
    (47, "Ag", "Silver", 107.87),
    (48, "Cd", "Cadmium", 112.41),
    (49, "In", "Indium", 114.82),
    (50, "Sn", "Tin", 118.71),
    (51, "Sb", "Antimony", 121.76),
    (52, "Te", "Tellurium", 127.60),
    (53, "I", "Iodine", 126.904),
    (54, "Xe", "Xenon", 131.29),
    (55, "Cs", "Cesium", 132.91),
    (56, "Ba", "Barium", 137.33),
    (57, "La", "Lanthanum", 138.91),
    (58, "Ce", "Cerium", 140.12),
    (59, "Pr", "Praseodymium", 140.91),
    (60, "Nd", "Neodymium", 144.24),
    (61, "Pm", "Promethium", None),
    (62, "Sm", "Samarium", 150.36),
    (63, "Eu", "Europium", 151.96),
    (64, "Gd", "Gadolinium", 157.25),
    (65, "Tb", "Terbium", 158.93),
    (66, "Dy", "Dysprosium", 162.50),
    (67, "Ho", "Holmium", 164.93),
    (68, "Er", "Erbium", 167.26),
    (69, "Tm", "Thulium", 168.93),
    (70, "Yb", "Ytterbium", 173.05),
    (71, "Lu", "Lutetium", 174.97),
    (72, "Hf", "Hafnium", 178.49),
    (73, "Ta", "Tantalum", 180.95),
    (74, "W", "Tungsten", 183.84),
    (75, "Re", "Rhenium", 186.21),
    (76, "Os", "Osmium", 190.23),
    (77, "Ir", "Iridium", 192.22),
    (78, "Pt", "Platinum", 195.08),
    (79, "Au", "Gold", 196.97),
    (80, "Hg", "Mercury", 200.59),
    (81, "Tl", "Thallium", 204.38),
    (82, "Pb", "Lead", 207.2),
    (83, "Bi", "Bismuth", 208.98),
    (84, "Po", "Polonium", None),
    (85, "At", "Astatine", None),
    (86, "Rn", "Radon", None),
    (87, "Fr", "Francium", None),
    (88, "Ra", "Radium", None),
    (89, "Ac", "Actinium", None),
    (90, "Th", "Thorium", 232.04),
    (91, "Pa", "Protactinium", 231.04),
    (92, "U", "Uranium", 238.03),
    (93, "Np", "Neptunium", None),
    (94, "Pu", "Plutonium", None),
    (95, "Am", "Americium", None),
    (96, "Cm", "Curium", None),
    (97, "Bk", "Berkelium", None),
    (98, "Cf", "Californium", None),
    (99, "Es", "Einsteinium", None),
    (100, "Fm", "Fermium", None),
    (101, "Md", "Mendelevium", None),
    (102, "No", "Nobelium", None),
    (103, "Lr", "Lawrencium", None),
    (104, "Rf", "Rutherfordium", None),
    (105, "Db", "Dubnium", None),
    (106, "Sg", "Seaborgium", None),
    (107, "Bh", "Bohrium", None),
    (108, "Hs", "Hassium", None),
    (109, "Mt", "Meitnerium", None),
    (110, "Ds", "Darmstadtium", None),
    (111, "Rg", "Roentgenium", None),
    (112, "Cn", "Copernicium", None),
    (113, "Nh", "Nihonium", None),
    (114, "Fl", "Flerovium", None),
    (115, "Mc", "Moscovium", None),
    (116, "Lv", "Livermorium", None),
    (117, "Ts", "Tennessine", None),
    (118, "Og", "Oganesson", None),
]

ELEMENTS: Final[tuple[Element, ...]] = tuple(
    Element(num, sym, name, weight)
    for num, sym, name, weight in _ELEMENTS_DATA
)

# Symbol used for atoms whose element could not be resolved at all
UNKNOWN_SYMBOL: Final[str] = "*"

# Two-letter elements allowed outside brackets (matched before single letters)
TWO_LETTER_ORGANIC: Final[FrozenSet[str]] = frozenset({"Cl", "Br"})

# Lowercase aromatic symbols -> element symbol
AROMATIC_SYMBOLS: Final[dict[str, str]] = {
    "b": "B",
    "c": "C",
    "n": "N",
    "o": "O",
    "p": "P",
    "s": "S",
    "se": "Se",
    "as": "As",
}

# Aromatic symbols allowed outside brackets
AROMATIC_ORGANIC: Final[FrozenSet[str]] = frozenset({"b", "c", "n", "o", "p", "s"})

# Standard valences for implicit hydrogen inference
VALENCES: Final[dict[str, int]] = {
    "C": 4,
    "N": 3,
    "O": 2,
    "S": 2,
    "P": 3,
    "F": 1,
    "Cl": 1,
    "Br": 1,
    "I": 1,
}

HYDROGEN_WEIGHT: Final[float] = 1.008


def atomic_weight(symbol: str) -> float:
    """Get the standard atomic weight for an element symbol.
    
    Args:
        symbol: Element symbol (e.g., "C", "Cl").
    
    Returns:
        Atomic weight, or 0.0 for unknown elements and elements
        without a standard weight.
    """
    elem = Element.from_symbol(symbol)
    if elem is None or elem.atomic_weight is None:
        return 0.0
    return elem.atomic_weight


def get_atomic_number(symbol: str) -> int:
    """Get atomic number for an element symbol, or 0 if not found."""
    elem = Element.from_symbol(symbol)
    return elem.atomic_number if elem else 0


def get_valence(symbol: str) -> int | None:
    """Get the standard valence used for implicit hydrogen inference."""
    return VALENCES.get(symbol)


def is_known_symbol(symbol: str) -> bool:
    """Check if symbol is an exact element symbol of the periodic table."""
    return Element.from_symbol(symbol) is not None
