import unittest

from simpchem.handlers import (
    ACID_HANDLER,
    BASE_HANDLER,
    NO_REACTION,
    SALT_HANDLER,
    TOO_MANY_REACTANTS,
    DomainHandler,
    products_match,
)
from simpchem.models import Counterpart, Domain, Fixed, ReactionRule, ReactionType
from simpchem.reactivity.acids import AcidBucket


def _explode(subject, other):
    raise RuntimeError("boom")


def _broken_handler():
    return DomainHandler(
        domain=Domain.ACID,
        membership=lambda formula: True,
        classifier=lambda formula: None,
        categories=lambda formula, is_concentrated=False: (AcidBucket.STRONG,),
        table={AcidBucket.STRONG: {Counterpart.STRONG_BASE: ReactionRule(Fixed(True), _explode)}},
        describe=lambda formula: "Broken",
    )


class TestProductsMatch(unittest.TestCase):
    def test_multiset_comparison(self):
        self.assertTrue(products_match(["NaCl", "H2O"], ["H2O", "NaCl"]))
        self.assertFalse(products_match(["NaCl", "H2O"], ["NaCl"]))
        self.assertFalse(products_match(["H2O", "H2O"], ["H2O", "NaCl"]))
        self.assertFalse(products_match([], []))


class TestDomainHandler(unittest.TestCase):
    def test_order_of_reactants_does_not_matter(self):
        forward = ACID_HANDLER.get_reaction_info("HCl", "NaOH")
        backward = ACID_HANDLER.get_reaction_info("NaOH", "HCl")
        self.assertEqual(forward, backward)
        self.assertEqual(backward.subject, "HCl")

    def test_analyze_neutralization(self):
        result = ACID_HANDLER.analyze_reaction("HCl + NaOH -> NaCl + H2O")
        self.assertTrue(result.valid)
        self.assertTrue(result.possible)
        self.assertEqual(result.domain, Domain.ACID)
        self.assertEqual(result.reaction_type, ReactionType.NEUTRALIZATION)
        self.assertEqual(result.predicted_products, ("NaCl", "H2O"))
        self.assertTrue(result.products_match)
        self.assertEqual(result.reactant_types["NaOH"], "Strong Base (Soluble)")

    def test_single_reactant_is_heated(self):
        result = SALT_HANDLER.analyze_reaction("CaCO3 -> ?")
        self.assertTrue(result.possible)
        self.assertEqual(result.predicted_products, ("CaO", "CO2"))
        self.assertEqual(result.reaction_type, ReactionType.DECOMPOSITION)
        self.assertFalse(result.products_match)

    def test_rejections(self):
        result = BASE_HANDLER.analyze_reaction("HCl + Zn -> ?")
        self.assertFalse(result.valid)
        self.assertEqual(result.error, "No base found in reactants")

        result = ACID_HANDLER.analyze_reaction("HCl + NaOH + KOH -> ?")
        self.assertEqual(result.error, TOO_MANY_REACTANTS)

        result = ACID_HANDLER.analyze_reaction("HCl + Cu -> ?")
        self.assertEqual(result.error, NO_REACTION)
        self.assertEqual(result.reactant_types["Cu"], "Metal")

        result = ACID_HANDLER.analyze_reaction("HCl + NaOH")
        self.assertEqual(result.error, "Invalid reaction format")

    def test_rule_errors_are_contained(self):
        handler = _broken_handler()
        with self.assertLogs("simpchem.handlers", level="ERROR"):
            self.assertIsNone(handler.get_reaction_info("HCl", "NaOH"))
        with self.assertLogs("simpchem.handlers", level="ERROR"):
            result = handler.analyze_reaction("HCl + NaOH -> ?")
        self.assertFalse(result.possible)
        self.assertEqual(result.error, "Internal error while applying acid rules")


if __name__ == '__main__':
    unittest.main()
