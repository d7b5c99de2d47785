import math
import unittest

from combikit.lazy_combinations import LazyCombinations, check_combination_size


class TestLazyCombinations(unittest.TestCase):

    def test_basic(self):
        data = [1, 2, 3, 4]
        result = list(LazyCombinations(data, 2))
        expected = [
            [1, 2],
            [1, 3],
            [1, 4],
            [2, 3],
            [2, 4],
            [3, 4]
        ]
        self.assertEqual(result, expected)

    def test_indices_lexicographic(self):
        idx = list(LazyCombinations("abcde", 3).indices())
        self.assertEqual(len(idx), math.comb(5, 3))
        self.assertEqual(idx, sorted(idx))
        self.assertEqual(len(set(idx)), len(idx))
        for t in idx:
            self.assertTrue(all(a < b for a, b in zip(t, t[1:])))

    def test_k_equals_length(self):
        data = [1, 2, 3]
        result = list(LazyCombinations(data, 3))
        self.assertEqual(result, [[1, 2, 3]])

    def test_len(self):
        self.assertEqual(len(LazyCombinations(range(10), 4)), 210)

    def test_restartable(self):
        comb = LazyCombinations([1, 2, 3], 2)
        self.assertEqual(list(comb), list(comb))

    def test_no_copy_reuses_buffer(self):
        comb = LazyCombinations([1, 2, 3], 2, yield_copy=False)
        it = iter(comb)
        first = next(it)
        self.assertEqual(first, [1, 2])
        second = next(it)
        self.assertIs(first, second)  # same buffer, rewritten
        self.assertEqual(first, [1, 3])

    def test_copy_is_independent(self):
        it = iter(LazyCombinations([1, 2, 3], 2))
        first = next(it)
        next(it)
        self.assertEqual(first, [1, 2])

    def test_k_zero_rejected(self):
        with self.assertRaises(ValueError):
            LazyCombinations([1, 2, 3], 0)

    def test_k_greater_than_length_rejected(self):
        with self.assertRaises(ValueError):
            LazyCombinations([1, 2], 3)

    def test_empty_input_rejected(self):
        with self.assertRaises(ValueError):
            LazyCombinations([], 1)

    def test_set_rejected(self):
        with self.assertRaises(TypeError):
            LazyCombinations({1, 2, 3}, 2)

    def test_check_combination_size_types(self):
        with self.assertRaises(TypeError):
            check_combination_size(3, 1.0)
        with self.assertRaises(TypeError):
            check_combination_size(3, True)
        self.assertEqual(check_combination_size(3, 2), 2)


if __name__ == "__main__":
    unittest.main(verbosity=2)
