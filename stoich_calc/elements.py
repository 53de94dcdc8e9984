from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class Element:
    symbol: str
    name: str
    atomic_number: int
    atomic_mass: float


# (symbol, name, atomic mass in g/mol), ordered by atomic number.
# Elements without a standard atomic weight use the mass number of their
# longest-lived isotope.
_ELEMENT_DATA = (
    ("H", "Hydrogen", 1.008), ("He", "Helium", 4.0026),
    ("Li", "Lithium", 6.94), ("Be", "Beryllium", 9.0122), ("B", "Boron", 10.81),
    ("C", "Carbon", 12.011), ("N", "Nitrogen", 14.007), ("O", "Oxygen", 15.999),
    ("F", "Fluorine", 18.998), ("Ne", "Neon", 20.180),
    ("Na", "Sodium", 22.990), ("Mg", "Magnesium", 24.305), ("Al", "Aluminium", 26.982),
    ("Si", "Silicon", 28.085), ("P", "Phosphorus", 30.974), ("S", "Sulfur", 32.06),
    ("Cl", "Chlorine", 35.45), ("Ar", "Argon", 39.948),
    ("K", "Potassium", 39.098), ("Ca", "Calcium", 40.078), ("Sc", "Scandium", 44.956),
    ("Ti", "Titanium", 47.867), ("V", "Vanadium", 50.942), ("Cr", "Chromium", 51.996),
    ("Mn", "Manganese", 54.938), ("Fe", "Iron", 55.845), ("Co", "Cobalt", 58.933),
    ("Ni", "Nickel", 58.693), ("Cu", "Copper", 63.546), ("Zn", "Zinc", 65.38),
    ("Ga", "Gallium", 69.723), ("Ge", "Germanium", 72.630), ("As", "Arsenic", 74.922),
    ("Se", "Selenium", 78.971), ("Br", "Bromine", 79.904), ("Kr", "Krypton", 83.798),
    ("Rb", "Rubidium", 85.468), ("Sr", "Strontium", 87.62), ("Y", "Yttrium", 88.906),
    ("Zr", "Zirconium", 91.224), ("Nb", "Niobium", 92.906), ("Mo", "Molybdenum", 95.95),
    ("Tc", "Technetium", 98.0), ("Ru", "Ruthenium", 101.07), ("Rh", "Rhodium", 102.91),
    ("Pd", "Palladium", 106.42), ("Ag", "Silver", 107.87), ("Cd", "Cadmium", 112.41),
    ("In", "Indium", 114.82), ("Sn", "Tin", 118.71), ("Sb", "Antimony", 121.76),
    ("Te", "Tellurium", 127.60), ("I", "Iodine", 126.90), ("Xe", "Xenon", 131.29),
    ("Cs", "Caesium", 132.91), ("Ba", "Barium", 137.33), ("La", "Lanthanum", 138.91),
    ("Ce", "Cerium", 140.12), ("Pr", "Praseodymium", 140.91), ("Nd", "Neodymium", 144.24),
    ("Pm", "Promethium", 145.0), ("Sm", "Samarium", 150.36), ("Eu", "Europium", 151.96),
    ("Gd", "Gadolinium", 157.25), ("Tb", "Terbium", 158.93), ("Dy", "Dysprosium", 162.50),
    ("Ho", "Holmium", 164.93), ("Er", "Erbium", 167.26), ("Tm", "Thulium", 168.93),
    ("Yb", "Ytterbium", 173.05), ("Lu", "Lutetium", 174.97), ("Hf", "Hafnium", 178.49),
    ("Ta", "Tantalum", 180.95), ("W", "Tungsten", 183.84), ("Re", "Rhenium", 186.21),
    ("Os", "Osmium", 190.23), ("Ir", "Iridium", 192.22), ("Pt", "Platinum", 195.08),
    ("Au", "Gold", 196.97), ("Hg", "Mercury", 200.59), ("Tl", "Thallium", 204.38),
    ("Pb", "Lead", 207.2), ("Bi", "Bismuth", 208.98), ("Po", "Polonium", 209.0),
    ("At", "Astatine", 210.0), ("Rn", "Radon", 222.0),
    ("Fr", "Francium", 223.0), ("Ra", "Radium", 226.0), ("Ac", "Actinium", 227.0),
    ("Th", "Thorium", 232.04), ("Pa", "Protactinium", 231.04), ("U", "Uranium", 238.03),
    ("Np", "Neptunium", 237.0), ("Pu", "Plutonium", 244.0), ("Am", "Americium", 243.0),
    ("Cm", "Curium", 247.0), ("Bk", "Berkelium", 247.0), ("Cf", "Californium", 251.0),
    ("Es", "Einsteinium", 252.0), ("Fm", "Fermium", 257.0), ("Md", "Mendelevium", 258.0),
    ("No", "Nobelium", 259.0), ("Lr", "Lawrencium", 262.0),
    ("Rf", "Rutherfordium", 267.0), ("Db", "Dubnium", 268.0), ("Sg", "Seaborgium", 269.0),
    ("Bh", "Bohrium", 270.0), ("Hs", "Hassium", 277.0), ("Mt", "Meitnerium", 278.0),
    ("Ds", "Darmstadtium", 281.0), ("Rg", "Roentgenium", 282.0), ("Cn", "Copernicium", 285.0),
    ("Nh", "Nihonium", 286.0), ("Fl", "Flerovium", 289.0), ("Mc", "Moscovium", 290.0),
    ("Lv", "Livermorium", 293.0), ("Ts", "Tennessine", 294.0), ("Og", "Oganesson", 294.0),
)


class ElementTable(Mapping):
    """Read-only symbol -> Element lookup.

    The core never mutates a table; pass a smaller one (see from_masses) to
    test against a partial periodic table.
    """

    def __init__(self, elements):
        self._elements = MappingProxyType({e.symbol: e for e in elements})

    @classmethod
    def from_masses(cls, masses):
        return cls(
            Element(symbol, symbol, z, float(mass))
            for z, (symbol, mass) in enumerate(masses.items(), start=1)
        )

    def __getitem__(self, symbol):
        return self._elements[symbol]

    def __iter__(self):
        return iter(self._elements)

    def __len__(self):
        return len(self._elements)

    def atomic_mass(self, symbol):
        return self._elements[symbol].atomic_mass

    def name(self, symbol):
        element = self._elements.get(symbol)
        return element.name if element else symbol


PERIODIC_TABLE = ElementTable(
    Element(symbol, name, z, mass)
    for z, (symbol, name, mass) in enumerate(_ELEMENT_DATA, start=1)
)
