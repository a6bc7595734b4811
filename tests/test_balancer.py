import math
import unittest

import numpy as np

from simpchem.balancer import (
    balance,
    balance_equation,
    build_system,
    element_counts,
    explain_balancing_steps,
    parse_formula,
    solve_coefficients,
)
from simpchem.errors import BalancingError, ReactionFormatError

REACTIONS = {
    "CH4 + O2 -> CO2 + H2O": (1, 2, 1, 2),
    "Fe + O2 -> Fe2O3": (4, 3, 2),
    "Al + HCl -> AlCl3 + H2": (2, 6, 2, 3),
    "C3H8 + O2 -> CO2 + H2O": (1, 5, 3, 4),
    "Ca(OH)2 + H3PO4 -> Ca3(PO4)2 + H2O": (3, 2, 1, 6),
    "KMnO4 + HCl -> KCl + MnCl2 + Cl2 + H2O": (2, 16, 2, 2, 5, 8),
}


class TestFormulaParsing(unittest.TestCase):
    def test_parse_formula(self):
        self.assertEqual(parse_formula("H2O"), [("H", 2), ("O", 1)])
        self.assertEqual(parse_formula("Ca(OH)2"), [("Ca", 1), ("O", 1), ("H", 1)])

    def test_element_counts(self):
        self.assertEqual(element_counts("Fe2(SO4)3"), {"Fe": 2, "S": 3, "O": 12})
        self.assertEqual(element_counts("CH3COOH"), {"C": 2, "H": 4, "O": 2})
        self.assertEqual(element_counts("K4[Fe(CN)6]"), {"K": 4, "Fe": 1, "C": 6, "N": 6})

    def test_element_counts_rejects_garbage(self):
        for formula in ("?", "Ca(OH", "NaCl)", "heat"):
            with self.assertRaises(ReactionFormatError, msg=formula):
                element_counts(formula)


class TestBalancer(unittest.TestCase):
    def test_methane_combustion(self):
        self.assertEqual(balance_equation("CH4 + O2 -> CO2 + H2O"), "1 CH4 + 2 O2 → 1 CO2 + 2 H2O")

    def test_known_coefficients(self):
        for reaction, expected in REACTIONS.items():
            result = balance(reaction)
            self.assertIsNotNone(result, reaction)
            self.assertEqual(result.coefficients, expected, reaction)

    def test_elements_are_conserved(self):
        for reaction in REACTIONS:
            result = balance(reaction)
            totals = {}
            for coefficient, compound in zip(result.reactant_coefficients, result.reactants):
                for element, count in element_counts(compound).items():
                    totals[element] = totals.get(element, 0) + coefficient * count
            for coefficient, compound in zip(result.product_coefficients, result.products):
                for element, count in element_counts(compound).items():
                    totals[element] = totals.get(element, 0) - coefficient * count
            self.assertTrue(all(v == 0 for v in totals.values()), reaction)

    def test_coefficients_are_minimal(self):
        for reaction in REACTIONS:
            self.assertEqual(math.gcd(*balance(reaction).coefficients), 1, reaction)

    def test_rebalancing_is_idempotent(self):
        for reaction in REACTIONS:
            once = balance_equation(reaction)
            self.assertEqual(balance_equation(once), once)
            self.assertEqual(balance_equation(reaction), once)

    def test_unbalanceable(self):
        # two independent solutions
        self.assertIsNone(balance_equation("H2 + O2 -> H2O2 + H2O"))
        # only the zero vector
        self.assertIsNone(balance_equation("NaCl -> KBr"))
        self.assertIsNone(balance_equation("CH4 + O2 -> ?"))
        self.assertIsNone(balance_equation("CH4 + O2"))

    def test_solve_coefficients_errors(self):
        with self.assertRaises(BalancingError):
            solve_coefficients(np.zeros((0, 0), dtype=np.int64))
        with self.assertRaises(BalancingError):
            solve_coefficients(np.array([[1, 0], [0, 1]]))

    def test_build_system(self):
        system = build_system("2 H2 + O2 -> 2 H2O")
        self.assertEqual(system.elements, ("H", "O"))
        self.assertEqual(system.compounds, ("H2", "O2", "H2O"))
        self.assertEqual(system.matrix.tolist(), [[-2, 0, 2], [0, -2, 1]])

    def test_explain_steps(self):
        steps = explain_balancing_steps("CH4 + O2 -> CO2 + H2O")
        self.assertEqual(steps[0], "Reactants: CH4, O2")
        self.assertEqual(steps[1], "Products: CO2, H2O")
        self.assertEqual(steps[2], "Unique elements involved: C, H, O")
        self.assertIn("C: [-1, 0, 1, 0]", steps)
        self.assertIn("Reduced row-echelon form:", steps)
        self.assertIn("[1, 0, 0, -1/2]", steps)
        self.assertEqual(steps[-2], "Final balanced equation:")
        self.assertEqual(steps[-1], "1 CH4 + 2 O2 → 1 CO2 + 2 H2O")

        steps = explain_balancing_steps("H2 + O2 -> H2O2 + H2O")
        self.assertTrue(steps[-1].startswith("Balancing failed:"))


if __name__ == '__main__':
    unittest.main()
