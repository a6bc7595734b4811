import unittest

import simpchem
from simpchem.analyzer import UNDETERMINED, AnalyzerOptions, ReactionAnalyzer
from simpchem.compounds.acids import AcidClassification, AcidStrength, AcidType
from simpchem.handlers import HANDLERS, NO_REACTION, TOO_MANY_REACTANTS, DomainHandler
from simpchem.models import Domain, ReactionType


def _explode(formula):
    raise RuntimeError("boom")


class TestScenarios(unittest.TestCase):
    def test_classify_sulfuric_acid(self):
        info = simpchem.classify("H2SO4")
        self.assertIsInstance(info, AcidClassification)
        self.assertEqual(info.strength, AcidStrength.STRONG)
        self.assertEqual(info.basicity_name, "diprotic")
        self.assertEqual(info.acid_type, AcidType.OXYACID)

    def test_classify_nonsense(self):
        self.assertIsNone(simpchem.classify("Xx99"))

    def test_classify_is_deterministic(self):
        for formula in ("H2SO4", "NaOH", "Fe2O3", "CuSO4", "Xx99"):
            self.assertEqual(simpchem.classify(formula), simpchem.classify(formula))

    def test_hcl_and_naoh(self):
        self.assertTrue(simpchem.can_react("HCl", "NaOH"))
        self.assertEqual(simpchem.predict_products("HCl", "NaOH"), ["NaCl", "H2O"])

    def test_silver_nitrate_and_salt(self):
        result = simpchem.analyze_reaction("AgNO3 + NaCl -> AgCl + NaNO3")
        self.assertTrue(result.possible)
        self.assertEqual(result.reaction_type, ReactionType.DOUBLE_REPLACEMENT)
        self.assertTrue(result.products_match)
        self.assertEqual(result.domain, Domain.SALT)

    def test_copper_and_sulfuric_acid(self):
        self.assertFalse(simpchem.can_react("Cu", "H2SO4"))
        self.assertTrue(simpchem.can_react("Cu", "H2SO4", is_concentrated=True))
        self.assertIn("SO2", simpchem.predict_products("Cu", "H2SO4", is_concentrated=True))


class TestReactionAnalyzer(unittest.TestCase):
    def setUp(self):
        self.analyzer = ReactionAnalyzer()

    def test_first_possible_handler_wins(self):
        result = self.analyzer.analyze_reaction("HCl + Na2CO3 -> NaCl + H2O + CO2")
        self.assertEqual(result.domain, Domain.ACID)
        self.assertTrue(result.products_match)

        salt_first = AnalyzerOptions(handler_order=("salt",))
        result = self.analyzer.analyze_reaction("HCl + Na2CO3 -> ?", salt_first)
        self.assertEqual(result.domain, Domain.SALT)
        self.assertEqual(result.predicted_products, ("NaCl", "H2O", "CO2"))

    def test_no_reaction_reports_detected_domains(self):
        result = self.analyzer.analyze_reaction("NaCl + KNO3 -> ?")
        self.assertFalse(result.valid)
        self.assertFalse(result.possible)
        self.assertEqual(result.error, NO_REACTION)
        self.assertIsNone(result.domain)
        self.assertEqual(
            result.detected_domains,
            {"acid": False, "base": False, "oxide": False, "salt": True},
        )

    def test_too_many_reactants(self):
        result = self.analyzer.analyze_reaction("HCl + NaOH + KCl -> ?")
        self.assertEqual(result.error, TOO_MANY_REACTANTS)

    def test_unknown_compounds(self):
        result = self.analyzer.analyze_reaction("Xx + Yy -> ?")
        self.assertEqual(result.error, UNDETERMINED)
        self.assertEqual(result.reactant_types, {"Xx": "Unknown", "Yy": "Unknown"})

    def test_malformed_reaction(self):
        result = self.analyzer.analyze_reaction("HCl + NaOH")
        self.assertFalse(result.valid)
        self.assertEqual(result.error, "Invalid reaction format")
        result = self.analyzer.analyze_reaction("HCl + -> NaCl")
        self.assertEqual(result.error, "Missing reactants or products")

    def test_predict_products_without_arrow(self):
        self.assertEqual(self.analyzer.predict_products("HCl + NaOH"), ["NaCl", "H2O"])
        self.assertIsNone(self.analyzer.predict_products("NaCl + KNO3"))

    def test_concentrated_option(self):
        analyzer = ReactionAnalyzer(AnalyzerOptions(is_concentrated=True))
        result = analyzer.analyze_reaction("Cu + HNO3 -> Cu(NO3)2 + NO2 + H2O")
        self.assertTrue(result.possible)
        self.assertEqual(result.reaction_type, ReactionType.REDOX)
        self.assertTrue(result.products_match)

    def test_compound_info(self):
        info = self.analyzer.get_compound_info("NaOH").to_dict()
        self.assertEqual(info["type"], "base")
        self.assertEqual(info["name"], "Strong Base (Soluble)")
        self.assertEqual(info["info"]["metal"], "Na")
        unknown = self.analyzer.get_compound_info("Xx99").to_dict()
        self.assertEqual(unknown["type"], "unknown")
        self.assertIsNone(unknown["info"])

    def test_failing_handler_is_skipped(self):
        broken = DomainHandler(
            domain=Domain.ACID,
            membership=_explode,
            classifier=_explode,
            categories=lambda formula, is_concentrated=False: (),
            table={},
            describe=_explode,
        )
        handlers = dict(HANDLERS)
        handlers[Domain.ACID] = broken
        analyzer = ReactionAnalyzer(handlers=handlers)
        with self.assertLogs("simpchem.analyzer", level="ERROR"):
            result = analyzer.analyze_reaction("HCl + NaOH -> NaCl + H2O")
        self.assertTrue(result.possible)
        self.assertEqual(result.domain, Domain.BASE)

    def test_failing_membership_check_still_reports(self):
        broken = DomainHandler(
            domain=Domain.ACID,
            membership=_explode,
            classifier=_explode,
            categories=lambda formula, is_concentrated=False: (),
            table={},
            describe=_explode,
        )
        handlers = dict(HANDLERS)
        handlers[Domain.ACID] = broken
        analyzer = ReactionAnalyzer(handlers=handlers)
        with self.assertLogs("simpchem.analyzer", level="ERROR") as logs:
            result = analyzer.analyze_reaction("NaCl + KNO3 -> ?")
        self.assertFalse(result.possible)
        self.assertFalse(result.detected_domains["acid"])
        self.assertTrue(result.detected_domains["salt"])
        self.assertTrue(any("membership check failed" in line for line in logs.output))

    def test_analyze_many(self):
        results = simpchem.analyzer.analyze_many(["HCl + NaOH -> ?", "NaCl + KNO3 -> ?"])
        self.assertEqual([r.possible for r in results], [True, False])


class TestAnalyzerOptions(unittest.TestCase):
    def test_handler_order_is_normalized(self):
        options = AnalyzerOptions(handler_order=("salt", "ACID"))
        self.assertEqual(options.handler_order, (Domain.SALT, Domain.ACID))

    def test_invalid_order(self):
        with self.assertRaises(ValueError):
            AnalyzerOptions(handler_order=("metal",))
        with self.assertRaises(ValueError):
            AnalyzerOptions(handler_order=())

    def test_from_mapping(self):
        options = AnalyzerOptions.from_mapping({"is_concentrated": True})
        self.assertTrue(options.is_concentrated)
        self.assertEqual(options.handler_order[0], Domain.ACID)


if __name__ == '__main__':
    unittest.main()
