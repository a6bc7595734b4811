"""Static reference data: atomic weights, hydrocarbon weights and gas constants."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Ideal gas constant in L·atm/(mol·K)
R_GAS = 0.0821
STANDARD_TEMPERATURE = 273.15  # K
STANDARD_PRESSURE = 1.0  # atm
MOLAR_VOLUME = 22.4  # L/mol at STP

ATOMIC_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "H": 1.008,
        "He": 4.0026,
        "Li": 6.94,
        "Be": 9.0122,
        "B": 10.81,
        "C": 12.01,
        "N": 14.01,
        "O": 16.0,
        "F": 18.998,
        "Ne": 20.18,
        "Na": 22.99,
        "Mg": 24.305,
        "Al": 26.982,
        "Si": 28.085,
        "P": 30.974,
        "S": 32.07,
        "Cl": 35.45,
        "Ar": 39.948,
        "K": 39.098,
        "Ca": 40.078,
        "Sc": 44.956,
        "Ti": 47.867,
        "V": 50.942,
        "Cr": 51.996,
        "Mn": 54.938,
        "Fe": 55.845,
        "Co": 58.933,
        "Ni": 58.693,
        "Cu": 63.546,
        "Zn": 65.38,
        "Ga": 69.723,
        "Ge": 72.63,
        "As": 74.922,
        "Se": 78.971,
        "Br": 79.904,
        "Kr": 83.798,
        "Rb": 85.468,
        "Sr": 87.62,
        "Y": 88.906,
        "Zr": 91.224,
        "Nb": 92.906,
        "Mo": 95.95,
        "Tc": 98,
        "Ru": 101.07,
        "Rh": 102.91,
        "Pd": 106.42,
        "Ag": 107.87,
        "Cd": 112.41,
        "In": 114.82,
        "Sn": 118.71,
        "Sb": 121.76,
        "Te": 127.6,
        "I": 126.9,
        "Xe": 131.29,
        "Cs": 132.91,
        "Ba": 137.33,
        "La": 138.91,
        "Ce": 140.12,
        "Pr": 140.91,
        "Nd": 144.24,
        "Pm": 145,
        "Sm": 150.36,
        "Eu": 151.96,
        "Gd": 157.25,
        "Tb": 158.93,
        "Dy": 162.5,
        "Ho": 164.93,
        "Er": 167.26,
        "Tm": 168.93,
        "Yb": 173.05,
        "Lu": 174.97,
        "Hf": 178.49,
        "Ta": 180.95,
        "W": 183.84,
        "Re": 186.21,
        "Os": 190.23,
        "Ir": 192.22,
        "Pt": 195.08,
        "Au": 196.97,
        "Hg": 200.59,
        "Tl": 204.38,
        "Pb": 207.2,
        "Bi": 208.98,
        "Po": 209,
        "At": 210,
        "Rn": 222,
        "Fr": 223,
        "Ra": 226,
        "Ac": 227,
        "Th": 232.04,
        "Pa": 231.04,
        "U": 238.03,
        "Np": 237,
        "Pu": 244,
        "Am": 243,
        "Cm": 247,
        "Bk": 247,
        "Cf": 251,
        "Es": 252,
        "Fm": 257,
        "Md": 258,
        "No": 259,
        "Lr": 266,
        "Rf": 267,
        "Db": 270,
        "Sg": 271,
        "Bh": 270,
        "Hs": 277,
        "Mt": 278,
        "Ds": 281,
        "Rg": 282,
        "Cn": 285,
        "Nh": 286,
        "Fl": 289,
        "Mc": 290,
        "Lv": 293,
        "Ts": 294,
        "Og": 294,
    }
)

# Tabulated weights take precedence over the atomic sum for these formulas.
HYDROCARBON_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        # alkanes
        "CH4": 16.04,
        "C2H6": 30.07,
        "C3H8": 44.1,
        "C4H10": 58.12,
        "C5H12": 72.15,
        "C6H14": 86.18,
        "C7H16": 100.21,
        "C8H18": 114.22,
        "C9H20": 128.25,
        "C10H22": 142.29,
        # alkynes and alkenes
        "C2H2": 26.04,
        "C2H4": 28.05,
        "C3H6": 42.08,
        "C4H8": 56.11,
        "C5H10": 70.13,
        "C6H12": 84.16,
        "C7H14": 98.19,
        "C8H16": 112.21,
        "C9H18": 126.24,
        "C10H20": 140.27,
        # aromatics
        "C6H6": 78.11,
        "C7H8": 92.14,
        "C8H10": 106.17,
        "C9H12": 120.19,
        "C10H14": 134.22,
        "C6H10": 82.15,
        # polycyclic aromatics
        "C10H8": 128.17,
        "C14H10": 178.23,
        "C16H10": 202.26,
        "C18H12": 228.29,
        "C20H12": 252.31,
        "C24H12": 300.36,
    }
)

HYDROCARBON_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "CH4": "methane",
        "C2H6": "ethane",
        "C3H8": "propane",
        "C4H10": "butane",
        "C5H12": "pentane",
        "C6H14": "hexane",
        "C7H16": "heptane",
        "C8H18": "octane",
        "C9H20": "nonane",
        "C10H22": "decane",
        "C2H2": "acetylene",
        "C2H4": "ethylene",
        "C3H6": "propylene",
        "C4H8": "butylene",
        "C6H6": "benzene",
        "C7H8": "toluene",
        "C8H10": "xylene",
        "C10H8": "naphthalene",
        "C14H10": "anthracene",
        "C16H10": "pyrene",
    }
)
