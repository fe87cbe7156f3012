# Outcome_test.py
import signal
import unittest

from outcome import DisplayPolicy, ExitOutcome, classify_wait_status


class TestExitOutcome(unittest.TestCase):
    def test_exit_code_maps_to_itself(self):
        self.assertEqual(ExitOutcome.exited(3).return_code, 3)

    def test_signal_maps_above_128(self):
        self.assertEqual(ExitOutcome.killed(signal.SIGTERM).return_code, 128 + signal.SIGTERM)

    def test_classify_raw_statuses(self):
        # Linux wait status encoding
        self.assertEqual(classify_wait_status(7 << 8), ExitOutcome.exited(7))
        self.assertEqual(classify_wait_status(signal.SIGKILL), ExitOutcome.killed(signal.SIGKILL))

    def test_stopped_and_continued_are_not_terminal(self):
        self.assertIsNone(classify_wait_status((signal.SIGSTOP << 8) | 0x7F))
        self.assertIsNone(classify_wait_status(0xFFFF))


class TestDisplayPolicy(unittest.TestCase):
    def test_on_success(self):
        self.assertTrue(DisplayPolicy.ON_SUCCESS.should_emit(ExitOutcome.exited(0)))
        self.assertFalse(DisplayPolicy.ON_SUCCESS.should_emit(ExitOutcome.exited(1)))

    def test_on_failure(self):
        self.assertTrue(DisplayPolicy.ON_FAILURE.should_emit(ExitOutcome.exited(1)))
        self.assertFalse(DisplayPolicy.ON_FAILURE.should_emit(ExitOutcome.exited(0)))

    def test_signal_counts_as_failure(self):
        killed = ExitOutcome.killed(signal.SIGINT)
        self.assertFalse(DisplayPolicy.ON_SUCCESS.should_emit(killed))
        self.assertTrue(DisplayPolicy.ON_FAILURE.should_emit(killed))


if __name__ == "__main__":
    unittest.main(verbosity=2)
