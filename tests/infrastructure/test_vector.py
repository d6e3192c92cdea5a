import unittest
import numpy as np

from mlc.domain._data_type import DataType
from mlc.domain._errors import ErrorKind
from mlc.infrastructure._array import NumericArray
from mlc.infrastructure._vector import vector_add, vector_dot, vector_scale, vector_sub
from mlc.infrastructure.ingestion._typed_buffer import array_from_buffer


def vec(values) -> NumericArray:
    return array_from_buffer(list(values), 1, (len(values),), DataType.FLOAT).unwrap()


class TestVectorOps(unittest.TestCase):
    def setUp(self) -> None:
        self.a = vec([1.0, 2.0, 3.0])
        self.b = vec([4.0, 5.0, 6.0])
        self.out = vec([0.0, 0.0, 0.0])

    def test_add(self) -> None:
        self.assertTrue(vector_add(self.a, self.b, self.out).ok)
        np.testing.assert_array_equal(self.out.data, [5, 7, 9])

    def test_sub(self) -> None:
        self.assertTrue(vector_sub(self.a, self.b, self.out).ok)
        np.testing.assert_array_equal(self.out.data, [-3, -3, -3])

    def test_dot(self) -> None:
        self.assertEqual(vector_dot(self.a, self.b).unwrap(), 32.0)

    def test_scale(self) -> None:
        self.assertTrue(vector_scale(self.a, 2.0, self.out).ok)
        np.testing.assert_array_equal(self.out.data, [2, 4, 6])

    def test_inputs_are_not_modified(self) -> None:
        vector_add(self.a, self.b, self.out)
        np.testing.assert_array_equal(self.a.data, [1, 2, 3])
        np.testing.assert_array_equal(self.b.data, [4, 5, 6])

    def test_result_may_reuse_an_operand(self) -> None:
        vector_add(self.a, self.b, self.a)
        np.testing.assert_array_equal(self.a.data, [5, 7, 9])

    def test_only_size_must_match(self) -> None:
        m = array_from_buffer([1, 2, 3, 4, 5, 6], 2, (2, 3), DataType.INT).unwrap()
        v = vec([1.0] * 6)
        out = vec([0.0] * 6)
        self.assertTrue(vector_add(m, v, out).ok)
        np.testing.assert_array_equal(out.data, [2, 3, 4, 5, 6, 7])

    def test_dot_of_minus_one_is_not_a_failure(self) -> None:
        res = vector_dot(vec([1.0]), vec([-1.0]))
        self.assertTrue(res.ok)
        self.assertEqual(res.unwrap(), -1.0)


class TestVectorFailures(unittest.TestCase):
    def setUp(self) -> None:
        self.a = vec([1.0, 2.0, 3.0])
        self.short = vec([1.0, 2.0])
        self.out = vec([7.0, 7.0, 7.0])

    def _assert_untouched(self) -> None:
        np.testing.assert_array_equal(self.out.data, [7, 7, 7])

    def test_size_mismatch_leaves_result_untouched(self) -> None:
        calls = [
            lambda s: vector_add(self.a, self.short, self.out, sink=s),
            lambda s: vector_sub(self.short, self.a, self.out, sink=s),
            lambda s: vector_scale(self.short, 3.0, self.out, sink=s),
        ]
        for call in calls:
            records = []
            res = call(records.append)
            self.assertIs(res.kind, ErrorKind.SHAPE_MISMATCH)
            self.assertEqual(len(records), 1)
            self._assert_untouched()

        res = vector_dot(self.a, self.short)
        self.assertIs(res.kind, ErrorKind.SHAPE_MISMATCH)
        self.assertIsNone(res.value)

    def test_result_size_mismatch(self) -> None:
        out = vec([7.0, 7.0])
        res = vector_add(self.a, self.a, out)
        self.assertIs(res.kind, ErrorKind.SHAPE_MISMATCH)
        np.testing.assert_array_equal(out.data, [7, 7])

    def test_invalid_operands(self) -> None:
        released = vec([1.0, 2.0, 3.0])
        released.release()

        for bad in (None, NumericArray.invalid(), released):
            self.assertIs(
                vector_add(bad, self.a, self.out).kind, ErrorKind.INVALID_ARGUMENT
            )
            self.assertIs(
                vector_sub(self.a, bad, self.out).kind, ErrorKind.INVALID_ARGUMENT
            )
            self.assertIs(vector_add(self.a, self.a, bad).kind, ErrorKind.INVALID_ARGUMENT)
            self.assertIs(vector_dot(bad, self.a).kind, ErrorKind.INVALID_ARGUMENT)
            self.assertIs(
                vector_scale(bad, 2.0, self.out).kind, ErrorKind.INVALID_ARGUMENT
            )
            self._assert_untouched()

    def test_diagnostic_names_operation(self) -> None:
        records = []
        vector_dot(None, self.a, sink=records.append)
        self.assertEqual(records[0].operation, "vector_dot")
        self.assertIs(records[0].kind, ErrorKind.INVALID_ARGUMENT)


if __name__ == "__main__":
    unittest.main()
