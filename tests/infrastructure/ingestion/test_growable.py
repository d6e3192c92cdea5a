import unittest
import numpy as np

from mlc.infrastructure.ingestion._growable import GrowableBuffer


class TestGrowableBuffer(unittest.TestCase):
    def test_doubles_when_full(self) -> None:
        buf = GrowableBuffer(4)
        self.assertEqual(buf.capacity, 4)

        buf.append_row([1.0, 2.0, 3.0])
        self.assertEqual(buf.capacity, 4)

        buf.append_row([4.0, 5.0])
        self.assertEqual(buf.capacity, 8)
        self.assertEqual(len(buf), 5)

    def test_large_append_keeps_doubling(self) -> None:
        buf = GrowableBuffer(2)
        buf.append_row(list(range(9)))
        self.assertEqual(buf.capacity, 16)
        self.assertEqual(len(buf), 9)

    def test_trimmed_is_exact_copy(self) -> None:
        buf = GrowableBuffer(8)
        buf.append_row([1.0, 2.0])
        buf.append_row([3.0])

        out = buf.trimmed()
        self.assertEqual(out.dtype, np.float32)
        np.testing.assert_array_equal(out, [1.0, 2.0, 3.0])

        out[0] = 42.0
        np.testing.assert_array_equal(buf.trimmed(), [1.0, 2.0, 3.0])

    def test_rejects_non_positive_capacity(self) -> None:
        with self.assertRaises(ValueError):
            GrowableBuffer(0)


if __name__ == "__main__":
    unittest.main()
