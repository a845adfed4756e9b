import unittest

from retro_alu.common.types import AluVector
from retro_alu.core.alu import AluFlags, AluOp
from retro_alu.harness.runner import DEFAULT_VECTORS, AluHarness

class TestAluHarness(unittest.TestCase):
    def setUp(self):
        self.harness = AluHarness()

    def test_default_vectors(self):
        self.assertEqual(self.harness.get_vectors(), DEFAULT_VECTORS)
        self.assertEqual([v.op for v in DEFAULT_VECTORS], list(AluOp))

    def test_run_defaults(self):
        results = self.harness.run()
        self.assertEqual(
            [(ev.result, ev.flags) for ev in results],
            [
                (0x2A, AluFlags()),                  # 15 + 27
                (0xE2, AluFlags(c=True, n=True)),    # 10 - 40 (borrow)
                (0x00, AluFlags(z=True)),            # 0xF0 & 0x0F
                (0xFF, AluFlags(n=True)),            # 0xF0 | 0x0F
                (0xAA, AluFlags(n=True)),            # 0x55 ^ 0xFF
                (0x02, AluFlags(c=True)),            # 0x81 << 1
                (0x01, AluFlags(c=True)),            # 0x03 >> 1
            ])

    def test_run_vector(self):
        ev = self.harness.run_vector(AluVector(255, 1, AluOp.ADD))
        self.assertEqual(ev.vector, AluVector(255, 1, AluOp.ADD))
        self.assertEqual(ev.result, 0)
        self.assertEqual(ev.flags, AluFlags(z=True, c=True))

    def test_custom_vectors(self):
        harness = AluHarness([AluVector(0x80, 0x01, AluOp.SUB)])
        results = harness.run()
        self.assertEqual(len(results), 1)
        self.assertEqual(results[0].result, 0x7F)
        self.assertTrue(results[0].flags.v)

    def test_history(self):
        self.harness.run()
        self.harness.run()
        history = self.harness.get_history()
        self.assertEqual(len(history), 14)
        # 同じ入力は常に同じ出力
        self.assertEqual(history[:7], history[7:])

        self.harness.clear_history()
        self.assertEqual(self.harness.get_history(), [])

    def test_empty_vectors_are_not_replaced(self):
        harness = AluHarness([])
        self.assertEqual(harness.get_vectors(), [])
        self.assertEqual(harness.run(), [])

    def test_invalid_vector(self):
        with self.assertRaises(ValueError):
            self.harness.run_vector(AluVector(0x100, 0, AluOp.ADD))
        self.assertEqual(self.harness.get_history(), [])

if __name__ == '__main__':
    unittest.main()
