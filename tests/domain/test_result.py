import unittest

from mlc.domain._errors import (
    ErrorKind,
    InvalidArgumentError,
    MalformedSourceError,
    MlcError,
    ResourceExhaustedError,
    ShapeMismatchError,
)
from mlc.domain._result import Result


class TestErrorKinds(unittest.TestCase):
    def test_each_error_carries_its_kind(self) -> None:
        self.assertIs(InvalidArgumentError("x").kind, ErrorKind.INVALID_ARGUMENT)
        self.assertIs(ShapeMismatchError(2, 3).kind, ErrorKind.SHAPE_MISMATCH)
        self.assertIs(ResourceExhaustedError("x").kind, ErrorKind.RESOURCE_EXHAUSTED)
        self.assertIs(MalformedSourceError("x").kind, ErrorKind.MALFORMED_SOURCE)

    def test_errors_are_runtime_errors(self) -> None:
        for err in (
            InvalidArgumentError("x"),
            ShapeMismatchError(1, 2),
            ResourceExhaustedError("x"),
            MalformedSourceError("x"),
        ):
            self.assertIsInstance(err, MlcError)
            self.assertIsInstance(err, RuntimeError)

    def test_shape_mismatch_records_sizes(self) -> None:
        err = ShapeMismatchError(3, 5)
        self.assertEqual((err.size_a, err.size_b), (3, 5))
        self.assertIn("3", str(err))
        self.assertIn("5", str(err))

    def test_malformed_source_mentions_location(self) -> None:
        err = MalformedSourceError("bad row", source="data.csv", line=3)
        self.assertEqual(err.line, 3)
        self.assertTrue(str(err).startswith("data.csv:3"))

        bare = MalformedSourceError("bad row")
        self.assertEqual(str(bare), "bad row")


class TestResult(unittest.TestCase):
    def test_success(self) -> None:
        res = Result.success(32.0)
        self.assertTrue(res.ok)
        self.assertTrue(res)
        self.assertIsNone(res.kind)
        self.assertEqual(res.unwrap(), 32.0)

    def test_success_without_value(self) -> None:
        res = Result.success()
        self.assertTrue(res.ok)
        self.assertIsNone(res.unwrap())

    def test_failure_keeps_value_and_raises_on_unwrap(self) -> None:
        err = ShapeMismatchError(1, 2)
        res = Result.failure(err, value="sentinel")
        self.assertFalse(res.ok)
        self.assertFalse(res)
        self.assertIs(res.kind, ErrorKind.SHAPE_MISMATCH)
        self.assertEqual(res.value, "sentinel")
        with self.assertRaises(ShapeMismatchError):
            res.unwrap()

    def test_negative_one_is_a_valid_success(self) -> None:
        res = Result.success(-1.0)
        self.assertTrue(res.ok)
        self.assertEqual(res.unwrap(), -1.0)


if __name__ == "__main__":
    unittest.main()
