import unittest

from mlc.domain._diagnostics import Diagnostic, DiagnosticSink
from mlc.domain._errors import ErrorKind, InvalidArgumentError, ShapeMismatchError
from mlc.infrastructure._diagnostics import emit, fail
from mlc.infrastructure._function import relu


class TestEmit(unittest.TestCase):
    def test_emit_to_injected_sink(self) -> None:
        records = []
        diag = emit(records.append, "vector_add", ShapeMismatchError(3, 2))

        self.assertEqual(records, [diag])
        self.assertIs(diag.kind, ErrorKind.SHAPE_MISMATCH)
        self.assertEqual(diag.operation, "vector_add")
        self.assertEqual(str(diag), "vector_add: Size mismatch: 3 vs 2.")

    def test_list_append_is_a_sink(self) -> None:
        self.assertIsInstance([].append, DiagnosticSink)

    def test_default_sink_logs_at_debug(self) -> None:
        with self.assertLogs("mlc", level="DEBUG") as cm:
            relu(None)
        self.assertEqual(len(cm.records), 1)
        self.assertIn("relu", cm.output[0])

    def test_fail_wraps_error(self) -> None:
        records = []
        err = InvalidArgumentError("bad")
        res = fail(records.append, "op", err, value=0)

        self.assertFalse(res.ok)
        self.assertIs(res.error, err)
        self.assertEqual(res.value, 0)
        self.assertEqual(records, [Diagnostic(ErrorKind.INVALID_ARGUMENT, "op", "bad")])

    def test_successful_calls_emit_nothing(self) -> None:
        from mlc.infrastructure._array import NumericArray
        import numpy as np

        records = []
        relu(NumericArray(np.ones(2), (2,)), sink=records.append)
        self.assertEqual(records, [])


if __name__ == "__main__":
    unittest.main()
