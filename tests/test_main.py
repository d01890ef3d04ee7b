import contextlib
import io
import logging
import unittest

import main


class MainTest(unittest.TestCase):
    def run_main(self, argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main.main(argv)
        return code, out.getvalue()

    def test_default_run(self):
        code, output = self.run_main([])
        self.assertEqual(code, 0)
        self.assertIn("Share 5:", output)
        self.assertIn("Success", output)

    def test_known_secret_small_field(self):
        code, output = self.run_main(["-t", "2", "-n", "3", "-p", "p257", "-s", "10", "-m", "random"])
        self.assertEqual(code, 0)
        self.assertIn("Reconstructed secret from 2 shares: 10", output)

    def test_leading_zero_decimal_secret(self):
        code, output = self.run_main(["-t", "2", "-n", "3", "-p", "p257", "-s", "010"])
        self.assertEqual(code, 0)
        self.assertIn("Reconstructed secret from 2 shares: 10", output)

    def test_existing_log_handlers_kept(self):
        root = logging.getLogger()
        marker = logging.NullHandler()
        root.addHandler(marker)
        try:
            before = list(root.handlers)
            self.run_main(["-t", "2", "-n", "3", "-p", "p257"])
            self.assertEqual(root.handlers, before)
        finally:
            root.removeHandler(marker)

    def test_threshold_above_shares(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main.main(["-t", "4", "-n", "3"])

    def test_non_prime_rejected(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main.main(["-p", "256", "--check-prime"])


if __name__ == '__main__':
    unittest.main()
