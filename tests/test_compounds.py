import unittest
from fractions import Fraction

from simpchem.compounds.acids import (
    AcidStrength,
    AcidType,
    acid_for_radical,
    classify_acid,
    describe_acid,
    is_acid,
)
from simpchem.compounds.bases import BaseStrength, Solubility, classify_base, is_base
from simpchem.compounds.oxides import (
    OxideCategory,
    classify_oxide,
    classify_oxide_category,
    get_corresponding_hydroxide,
    get_oxidation_state,
    is_oxide,
)
from simpchem.compounds.salts import (
    SaltPH,
    SaltType,
    classify_salt,
    determine_salt_ph,
    is_salt,
    is_soluble,
)


class TestAcids(unittest.TestCase):
    def test_sulfuric_acid(self):
        info = classify_acid("H2SO4")
        self.assertEqual(info.strength, AcidStrength.STRONG)
        self.assertEqual(info.basicity, 2)
        self.assertEqual(info.basicity_name, "diprotic")
        self.assertEqual(info.acid_type, AcidType.OXYACID)
        self.assertEqual(info.radical, "SO4")
        self.assertEqual(info.anion_name, "sulfate")
        self.assertEqual(info.corresponding_oxide, "SO3")

    def test_recognition(self):
        for formula in ("HCl", "HNO3", "CH3COOH", "H3AsO4"):
            self.assertTrue(is_acid(formula), formula)
        for formula in ("H2O", "H2O2", "HgO", "NaOH", "NaCl", "Xx99"):
            self.assertFalse(is_acid(formula), formula)

    def test_unknown_acid_falls_back_to_structure(self):
        info = classify_acid("H3AsO4")
        self.assertEqual(info.strength, AcidStrength.WEAK)
        self.assertEqual(info.basicity, 3)
        self.assertEqual(info.acid_type, AcidType.OXYACID)
        self.assertEqual(info.radical, "AsO4")

    def test_describe(self):
        self.assertEqual(describe_acid("HCl"), "Strong Non-oxygenated Acid (monoprotic)")
        self.assertEqual(describe_acid("NaCl"), "Not an acid")
        self.assertEqual(acid_for_radical("SO4"), "H2SO4")


class TestBases(unittest.TestCase):
    def test_strong_base(self):
        info = classify_base("NaOH")
        self.assertEqual(info.metal, "Na")
        self.assertEqual(info.hydroxide_count, 1)
        self.assertEqual(info.strength, BaseStrength.STRONG)
        self.assertEqual(info.solubility, Solubility.SOLUBLE)
        self.assertEqual(info.corresponding_oxide, "Na2O")

    def test_weak_and_amphoteric(self):
        info = classify_base("Fe(OH)3")
        self.assertEqual(info.strength, BaseStrength.WEAK)
        self.assertEqual(info.corresponding_oxide, "Fe2O3")
        self.assertTrue(classify_base("Al(OH)3").amphoteric)

    def test_structural_base(self):
        self.assertTrue(is_base("Sr(OH)2"))
        self.assertEqual(classify_base("Sr(OH)2").strength, BaseStrength.STRONG)

    def test_not_bases(self):
        for formula in ("CH3COOH", "H2O", "HCl", "NaCl"):
            self.assertFalse(is_base(formula), formula)
            self.assertIsNone(classify_base(formula))


class TestOxides(unittest.TestCase):
    def test_known_categories(self):
        expected = {
            "CaO": OxideCategory.BASIC,
            "Al2O3": OxideCategory.AMPHOTERIC,
            "SO3": OxideCategory.ACIDIC,
            "CO": OxideCategory.INDIFFERENT,
            "Na2O2": OxideCategory.PEROXIDE,
            "KO2": OxideCategory.SUPEROXIDE,
        }
        for formula, category in expected.items():
            self.assertEqual(classify_oxide_category(formula), category, formula)

    def test_structural_categories(self):
        self.assertEqual(classify_oxide_category("Li2O2"), OxideCategory.PEROXIDE)
        self.assertEqual(classify_oxide_category("SeO2"), OxideCategory.ACIDIC)
        self.assertEqual(classify_oxide_category("GeO2"), OxideCategory.ACIDIC)
        self.assertEqual(classify_oxide_category("Fe3O4"), OxideCategory.BASIC)

    def test_oxidation_state(self):
        self.assertEqual(get_oxidation_state("Fe2O3"), 3)
        self.assertEqual(get_oxidation_state("Fe3O4"), Fraction(8, 3))
        self.assertEqual(classify_oxide("Fe3O4").to_dict()["oxidation_state"], "8/3")

    def test_corresponding_hydroxide(self):
        self.assertEqual(get_corresponding_hydroxide("CaO"), "Ca(OH)2")
        self.assertEqual(get_corresponding_hydroxide("Fe2O3"), "Fe(OH)3")
        self.assertIsNone(get_corresponding_hydroxide("SO3"))

    def test_not_oxides(self):
        for formula in ("H2SO4", "NaOH", "CaCO3", "NaCl"):
            self.assertFalse(is_oxide(formula), formula)
            self.assertIsNone(classify_oxide(formula))


class TestSalts(unittest.TestCase):
    def test_normal_salt(self):
        info = classify_salt("NaCl")
        self.assertEqual(info.salt_type, SaltType.NORMAL)
        self.assertEqual((info.cation, info.anion), ("Na", "Cl"))
        self.assertEqual(info.solubility, Solubility.SOLUBLE)
        self.assertEqual(info.ph, SaltPH.NEUTRAL)

    def test_salt_types(self):
        self.assertEqual(classify_salt("NaHCO3").salt_type, SaltType.ACIDIC)
        self.assertEqual(classify_salt("KAl(SO4)2").salt_type, SaltType.DOUBLE)
        self.assertEqual(classify_salt("BaSO4").salt_type, SaltType.NORMAL)

    def test_solubility(self):
        self.assertFalse(is_soluble("BaSO4"))
        self.assertFalse(is_soluble("AgCl"))
        self.assertTrue(is_soluble("KNO3"))
        self.assertIsNone(is_soluble("Xx99"))

    def test_ph(self):
        self.assertEqual(determine_salt_ph("Na2CO3"), SaltPH.BASIC)
        self.assertEqual(determine_salt_ph("NH4Cl"), SaltPH.ACIDIC)

    def test_not_salts(self):
        for formula in ("NaOH", "H2SO4", "CaO", "Na2O", "Xx99"):
            self.assertFalse(is_salt(formula), formula)
            self.assertIsNone(classify_salt(formula))


if __name__ == '__main__':
    unittest.main()
