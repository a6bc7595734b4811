import unittest

from simpchem.models import Counterpart, ReactionType
from simpchem.reactivity import acids as acid_rules
from simpchem.reactivity import bases as base_rules
from simpchem.reactivity import oxides as oxide_rules
from simpchem.reactivity import salts as salt_rules
from simpchem.reactivity.acids import AcidBucket
from simpchem.reactivity.base import (
    complex_salt,
    describe_reactant,
    detect_counterpart,
    heuristic_oxysalt,
    is_more_active,
)


class TestCounterparts(unittest.TestCase):
    def test_detect_counterpart(self):
        expected = {
            "heat": Counterpart.HEAT,
            "H2O": Counterpart.WATER,
            "Zn": Counterpart.METAL,
            "Cl2": Counterpart.NON_METAL,
            "HCl": Counterpart.ACID,
            "CaO": Counterpart.BASIC_OXIDE,
            "CO2": Counterpart.ACIDIC_OXIDE,
            "ZnO": Counterpart.AMPHOTERIC_OXIDE,
            "NaOH": Counterpart.STRONG_BASE,
            "Cu(OH)2": Counterpart.BASE,
            "Al(OH)3": Counterpart.AMPHOTERIC_HYDROXIDE,
            "CuSO4": Counterpart.SALT,
            "Xx99": Counterpart.UNKNOWN,
        }
        for formula, kind in expected.items():
            self.assertEqual(detect_counterpart(formula), kind, formula)

    def test_describe_reactant(self):
        self.assertEqual(describe_reactant("heat"), "Heat (Thermal Decomposition)")
        self.assertEqual(describe_reactant("Zn"), "Metal")
        self.assertEqual(describe_reactant("Xx99"), "Unknown")

    def test_activity_series(self):
        self.assertTrue(is_more_active("Zn", "Cu"))
        self.assertFalse(is_more_active("Cu", "Zn"))
        self.assertFalse(is_more_active("Xx", "Cu"))

    def test_complex_and_heuristic_salts(self):
        self.assertEqual(complex_salt("Na", 1, "Al", 3), "NaAlO2")
        self.assertEqual(complex_salt("Na", 1, "Zn", 2), "Na2ZnO2")
        self.assertEqual(complex_salt("Na", 1, "Cr", 3), "Na3CrO3")
        self.assertEqual(heuristic_oxysalt("Ca", 2, "P", 3), "Ca3(PO4)2")
        self.assertEqual(heuristic_oxysalt("Na", 1, "Cl", 1), "NaClO2")


class TestAcidRules(unittest.TestCase):
    def test_metal_above_hydrogen(self):
        info = acid_rules.get_reaction_info("HCl", "Zn")
        self.assertEqual(info.products, ("ZnCl2", "H2"))
        self.assertEqual(info.reaction_type, ReactionType.SINGLE_REPLACEMENT)
        self.assertEqual(acid_rules.predict_products("HCl", "Fe"), ("FeCl2", "H2"))

    def test_metal_below_hydrogen(self):
        self.assertFalse(acid_rules.can_react("H2SO4", "Cu"))
        self.assertFalse(acid_rules.can_react("H2CO3", "Cu"))

    def test_concentrated_oxidizing_acid(self):
        self.assertEqual(
            acid_rules.categories_of("H2SO4", is_concentrated=True),
            (AcidBucket.CONCENTRATED, AcidBucket.STRONG),
        )
        self.assertEqual(acid_rules.categories_of("HCl", is_concentrated=True), (AcidBucket.STRONG,))
        info = acid_rules.get_reaction_info("HNO3", "Cu", is_concentrated=True)
        self.assertEqual(info.products, ("Cu(NO3)2", "NO2", "H2O"))
        self.assertEqual(info.reaction_type, ReactionType.REDOX)
        # Zn is not in the concentrated row and falls back to the strength row.
        info = acid_rules.get_reaction_info("H2SO4", "Zn", is_concentrated=True)
        self.assertEqual(info.reaction_type, ReactionType.SINGLE_REPLACEMENT)

    def test_neutralization(self):
        self.assertEqual(acid_rules.predict_products("HCl", "NaOH"), ("NaCl", "H2O"))
        self.assertEqual(acid_rules.predict_products("H2SO4", "Ba(OH)2"), ("BaSO4", "H2O"))
        self.assertEqual(acid_rules.predict_products("H2SO4", "CuO"), ("CuSO4", "H2O"))

    def test_salt_of_volatile_acid(self):
        info = acid_rules.get_reaction_info("HCl", "Na2CO3")
        self.assertEqual(info.products, ("NaCl", "H2O", "CO2"))
        self.assertEqual(info.reaction_type, ReactionType.DOUBLE_REPLACEMENT)
        self.assertFalse(acid_rules.can_react("HCl", "KNO3"))

    def test_weaker_acids_release_fewer_anions(self):
        # moderate acids still displace sulfide, but not sulfite
        self.assertEqual(acid_rules.predict_products("H3PO4", "Na2S"), ("Na3PO4", "H2S"))
        self.assertIsNone(acid_rules.predict_products("H3PO4", "Na2SO3"))
        # weak acids only displace carbonates
        self.assertIsNone(acid_rules.predict_products("H2CO3", "Na2S"))

    def test_thermal_decomposition(self):
        self.assertEqual(acid_rules.predict_products("H2CO3", "heat"), ("H2O", "CO2"))
        self.assertFalse(acid_rules.can_react("HCl", "heat"))


class TestBaseRules(unittest.TestCase):
    def test_acidic_oxide(self):
        self.assertEqual(base_rules.predict_products("NaOH", "CO2"), ("Na2CO3", "H2O"))

    def test_halogen(self):
        info = base_rules.get_reaction_info("NaOH", "Cl2")
        self.assertEqual(info.products, ("NaCl", "NaClO", "H2O"))
        self.assertEqual(info.reaction_type, ReactionType.REDOX)

    def test_precipitation(self):
        self.assertEqual(base_rules.predict_products("NaOH", "CuSO4"), ("Cu(OH)2", "Na2SO4"))
        self.assertFalse(base_rules.can_react("NaOH", "KCl"))

    def test_amphoteric_hydroxide(self):
        info = base_rules.get_reaction_info("Al(OH)3", "NaOH")
        self.assertEqual(info.products, ("NaAlO2", "H2O"))
        self.assertEqual(info.reaction_type, ReactionType.COMPLEX_FORMATION)

    def test_heating(self):
        self.assertEqual(base_rules.predict_products("Cu(OH)2", "heat"), ("CuO", "H2O"))
        self.assertEqual(base_rules.predict_products("NH4OH", "heat"), ("NH3", "H2O"))
        self.assertFalse(base_rules.can_react("NaOH", "heat"))


class TestOxideRules(unittest.TestCase):
    def test_hydration(self):
        self.assertEqual(oxide_rules.predict_products("CaO", "H2O"), ("Ca(OH)2",))
        self.assertEqual(oxide_rules.predict_products("SO3", "H2O"), ("H2SO4",))
        self.assertFalse(oxide_rules.can_react("SiO2", "H2O"))

    def test_oxide_combination(self):
        info = oxide_rules.get_reaction_info("CaO", "CO2")
        self.assertEqual(info.products, ("CaCO3",))
        self.assertEqual(info.reaction_type, ReactionType.OXIDE_COMBINATION)
        self.assertEqual(oxide_rules.predict_products("CO2", "CaO"), ("CaCO3",))
        self.assertEqual(oxide_rules.predict_products("Na2O", "Al2O3"), ("NaAlO2",))

    def test_acidic_oxide_with_base(self):
        self.assertEqual(oxide_rules.predict_products("SO3", "NaOH"), ("Na2SO4", "H2O"))
        self.assertFalse(oxide_rules.can_react("CO2", "SO2"))

    def test_peroxides(self):
        self.assertEqual(oxide_rules.predict_products("Na2O2", "H2O"), ("NaOH", "H2O2"))
        self.assertEqual(oxide_rules.predict_products("KO2", "H2O"), ("KOH", "H2O2", "O2"))

    def test_indifferent(self):
        self.assertFalse(oxide_rules.can_react("CO", "H2O"))
        self.assertFalse(oxide_rules.can_react("CO", "HCl"))


class TestSaltRules(unittest.TestCase):
    def test_metal_displacement(self):
        info = salt_rules.get_reaction_info("CuSO4", "Zn")
        self.assertEqual(info.products, ("ZnSO4", "Cu"))
        self.assertEqual(info.reaction_type, ReactionType.SINGLE_REPLACEMENT)
        self.assertFalse(salt_rules.can_react("ZnSO4", "Cu"))

    def test_exchange(self):
        self.assertEqual(salt_rules.predict_products("AgNO3", "NaCl"), ("AgCl", "NaNO3"))
        self.assertEqual(salt_rules.predict_products("BaCl2", "Na2SO4"), ("BaSO4", "NaCl"))
        self.assertFalse(salt_rules.can_react("NaCl", "KNO3"))

    def test_heating(self):
        self.assertEqual(salt_rules.predict_products("CaCO3", "heat"), ("CaO", "CO2"))
        self.assertEqual(salt_rules.predict_products("KNO3", "heat"), ("KNO2", "O2"))
        self.assertEqual(salt_rules.predict_products("Cu(NO3)2", "heat"), ("CuO", "NO2", "O2"))
        self.assertEqual(
            salt_rules.predict_products("NaHCO3", "heat"), ("Na2CO3", "H2O", "CO2")
        )
        self.assertEqual(salt_rules.predict_products("CuSO4", "heat"), ("CuO", "SO3"))
        self.assertEqual(salt_rules.predict_products("KClO4", "heat"), ("KCl", "O2"))
        self.assertFalse(salt_rules.can_react("NaCl", "heat"))


if __name__ == '__main__':
    unittest.main()
