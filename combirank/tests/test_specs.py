import logging
import unittest
from dataclasses import FrozenInstanceError
from math import factorial

from ..errors import InvalidSpec, RankError
from ..specs import (Spec, SpecKind, combination_spec, permutation_spec, permutation_spec_from_array,
    radix_spec, radix_spec_from_array, word_spec, word_spec_from_array
)

logger = logging.getLogger(__name__)


class TestSpecConstruction(unittest.TestCase):

    def test_cardinalities(self):
        self.assertEqual(radix_spec(3, 2).cardinality, 8)
        self.assertEqual(radix_spec(4, 7).cardinality, 7 ** 4)
        self.assertEqual(permutation_spec(4).cardinality, 24)
        self.assertEqual(permutation_spec(25).cardinality, factorial(25))
        self.assertEqual(combination_spec(5, 2).cardinality, 10)
        self.assertEqual(word_spec(4, 2, [2, 2]).cardinality, 6)
        self.assertEqual(word_spec(10, 3, [5, 3, 2]).cardinality, 2520)

    def test_size_zero(self):
        for spec in (radix_spec(0, 1), permutation_spec(0), combination_spec(0, 0), word_spec(0, 0, [])):
            with self.subTest(spec=str(spec)):
                self.assertEqual(spec.size, 0)
                self.assertEqual(spec.cardinality, 1)

    def test_invalid_parameters(self):
        bad_calls = (
            lambda: radix_spec(-1, 2),
            lambda: radix_spec(3, 0),
            lambda: radix_spec(2.5, 2),
            lambda: permutation_spec(-3),
            lambda: permutation_spec("4"),
            lambda: combination_spec(4, 5),
            lambda: combination_spec(4, -1),
            lambda: word_spec(4, 2, [1, 2]),
            lambda: word_spec(4, 3, [2, 2]),
            lambda: word_spec(4, 2, [5, -1]),
            lambda: word_spec(4, 2, None),
        )
        for call in bad_calls:
            with self.assertRaises(InvalidSpec):
                call()

    def test_direct_construction_validates(self):
        bad_params = (
            dict(kind=SpecKind.RADIX, size=-1, radix=2),
            dict(kind=SpecKind.RADIX, size=3),
            dict(kind=SpecKind.RADIX, size=3, radix=0),
            dict(kind=SpecKind.PERMUTATION, size=-2),
            dict(kind=SpecKind.PERMUTATION, size=3, radix=2),
            dict(kind=SpecKind.COMBINATION, size=3, zero_count=5),
            dict(kind=SpecKind.COMBINATION, size=3),
            dict(kind=SpecKind.WORD, size=3, type_counts=(1, 1)),
            dict(kind=SpecKind.WORD, size=3, type_counts=(4, -1)),
            dict(kind=SpecKind.WORD, size=3),
            dict(kind="radix", size=3, radix=2),
        )
        for params in bad_params:
            with self.subTest(**{k: str(v) for k, v in params.items()}):
                with self.assertRaises(InvalidSpec):
                    Spec(**params)

    def test_direct_construction_matches_constructors(self):
        self.assertEqual(Spec(SpecKind.RADIX, 3, radix=2), radix_spec(3, 2))
        self.assertEqual(Spec(SpecKind.RADIX, 3, radix=2).cardinality, 8)
        spec = Spec(SpecKind.WORD, 4, type_counts=[2, 2])
        self.assertEqual(spec.type_counts, (2, 2))
        self.assertEqual(spec.cardinality, 6)
        self.assertEqual(spec, word_spec(4, 2, [2, 2]))

    def test_invalid_spec_is_value_error(self):
        with self.assertRaises(ValueError):
            radix_spec(3, 0)
        with self.assertRaises(RankError):
            combination_spec(1, 2)

    def test_immutable(self):
        spec = word_spec(4, 2, [3, 1])
        with self.assertRaises(FrozenInstanceError):
            spec.size = 5
        with self.assertRaises(FrozenInstanceError):
            spec.cardinality = 1
        self.assertIsInstance(spec.type_counts, tuple)

    def test_equality_and_hash(self):
        self.assertEqual(word_spec(3, 2, [1, 2]), word_spec(3, 2, (1, 2)))
        self.assertNotEqual(radix_spec(3, 2), radix_spec(3, 3))
        self.assertEqual(len({permutation_spec(3), permutation_spec(3)}), 1)

    def test_kinds_and_str(self):
        self.assertIs(radix_spec(3, 2).kind, SpecKind.RADIX)
        self.assertEqual(str(radix_spec(3, 2)), "radix(size=3, radix=2)")
        self.assertEqual(str(permutation_spec(3)), "permutation(size=3)")
        self.assertEqual(str(combination_spec(3, 1)), "combination(size=3, zero_count=1)")
        self.assertEqual(str(word_spec(3, 2, [1, 2])), "word(size=3, type_counts=[1, 2])")

    def test_types(self):
        self.assertEqual(word_spec(5, 3, [1, 0, 4]).types, 3)
        self.assertIsNone(permutation_spec(5).types)


class TestSpecFromArray(unittest.TestCase):

    def test_radix_from_array(self):
        spec = radix_spec_from_array([0, 3, 1, 2], 4)
        self.assertEqual(spec, radix_spec(4, 4))
        with self.assertRaises(InvalidSpec):
            radix_spec_from_array([0, 4], 4)

    def test_permutation_from_array(self):
        self.assertEqual(permutation_spec_from_array([2, 0, 3, 1]), permutation_spec(4))
        self.assertEqual(permutation_spec_from_array([]), permutation_spec(0))
        for bad in ([1, 2, 3], [0, 0, 1], [0, 2]):
            with self.assertRaises(InvalidSpec):
                permutation_spec_from_array(bad)

    def test_word_from_array(self):
        spec = word_spec_from_array([2, 0, 2, 2, 0])
        self.assertEqual(spec.size, 5)
        self.assertEqual(spec.types, 3)
        self.assertEqual(spec.type_counts, (2, 0, 3))
        self.assertEqual(spec.cardinality, 10)
        logger.debug(f"test_word_from_array: inferred {spec}")

    def test_word_from_empty_array(self):
        spec = word_spec_from_array([])
        self.assertEqual(spec, word_spec(0, 0, []))

    def test_word_from_array_rejects_negative(self):
        with self.assertRaises(InvalidSpec):
            word_spec_from_array([0, -1])


if __name__ == '__main__':
    unittest.main()
