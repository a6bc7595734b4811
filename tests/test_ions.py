import math
import unittest

from simpchem.elements import (
    ElementCategory,
    categorize_element,
    forms_amphoteric_oxide,
    forms_indifferent_oxide,
    is_alkaline_earth_metal,
    is_metal,
    is_noble_gas,
    is_non_metal,
)
from simpchem.ions import (
    ANION_CHARGES,
    anion_charge,
    balance_salt_formula,
    cation_charge,
    contains_oxygen,
    extract_ions,
    extract_ions_with_oxidation_state,
    get_most_likely_valence,
    salt_counts,
)


class TestElements(unittest.TestCase):
    def test_categories(self):
        self.assertEqual(categorize_element("Na"), ElementCategory.METAL)
        self.assertEqual(categorize_element("Si"), ElementCategory.METALLOID)
        self.assertEqual(categorize_element("Cl"), ElementCategory.NON_METAL)
        self.assertEqual(categorize_element("Ar"), ElementCategory.NOBLE_GAS)
        self.assertEqual(categorize_element("Xx"), ElementCategory.UNKNOWN)

    def test_noble_gases_count_as_non_metals(self):
        self.assertTrue(is_non_metal("Ar"))
        self.assertTrue(is_noble_gas("Ar"))
        self.assertFalse(is_metal("Ar"))

    def test_groups(self):
        self.assertTrue(is_alkaline_earth_metal("Ca"))
        self.assertFalse(is_alkaline_earth_metal("Na"))
        self.assertTrue(forms_amphoteric_oxide("Zn"))
        self.assertTrue(forms_indifferent_oxide("N"))


class TestIons(unittest.TestCase):
    def test_extract_ions(self):
        ions = extract_ions("AgNO3")
        self.assertEqual((ions.cation, ions.anion), ("Ag", "NO3"))
        ions = extract_ions("NaHCO3")
        self.assertEqual((ions.cation, ions.anion), ("Na", "HCO3"))
        ions = extract_ions("Xx99")
        self.assertIsNone(ions.cation)
        self.assertIsNone(ions.anion)

    def test_oxidation_state_from_neutrality(self):
        comp = extract_ions_with_oxidation_state("Fe2(SO4)3")
        self.assertEqual(comp.cation, "Fe")
        self.assertEqual(comp.anion, "SO4")
        self.assertEqual(comp.cation_count, 2)
        self.assertEqual(comp.anion_count, 3)
        self.assertEqual(comp.oxidation_state, 3)

        self.assertEqual(extract_ions_with_oxidation_state("FeSO4").oxidation_state, 2)
        self.assertEqual(extract_ions_with_oxidation_state("(NH4)2SO4").oxidation_state, 1)

    def test_valence_context(self):
        self.assertEqual(get_most_likely_valence("Fe"), 3)
        # HCl only reaches Fe(II)
        self.assertEqual(get_most_likely_valence("Fe", "HCl"), 2)
        # oxygen-bearing context picks the lowest positive valence
        self.assertEqual(get_most_likely_valence("Fe", "H3PO4"), 2)
        self.assertIsNone(get_most_likely_valence("Xx"))

    def test_contains_oxygen(self):
        self.assertTrue(contains_oxygen("H2SO4"))
        self.assertFalse(contains_oxygen("OsCl4"))
        self.assertFalse(contains_oxygen(None))

    def test_balance_salt_formula(self):
        self.assertEqual(balance_salt_formula("Ca", "Cl"), "CaCl2")
        self.assertEqual(balance_salt_formula("Fe", "SO4"), "Fe2(SO4)3")
        self.assertEqual(balance_salt_formula("Fe", "Cl", "HCl"), "FeCl2")
        self.assertEqual(balance_salt_formula("NH4", "SO4"), "(NH4)2SO4")
        self.assertEqual(balance_salt_formula("Al", "O"), "Al2O3")
        self.assertIsNone(balance_salt_formula("Xx", "Cl"))
        self.assertIsNone(balance_salt_formula("Na", ""))

    def test_charge_balance_is_neutral_and_coprime(self):
        for cation in ("Na", "Ca", "Al", "Fe", "Sn", "NH4"):
            for anion in ANION_CHARGES:
                c = cation_charge(cation)
                a = anion_charge(anion)
                n_c, n_a = salt_counts(c, a)
                self.assertEqual(n_c * abs(c), n_a * abs(a), (cation, anion))
                self.assertEqual(math.gcd(n_c, n_a), 1, (cation, anion))

    def test_zero_charge_rejected(self):
        with self.assertRaises(ValueError):
            salt_counts(0, -1)


if __name__ == '__main__':
    unittest.main()
