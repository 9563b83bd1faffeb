# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the best-effort debug log."""

import os
import tempfile
import unittest
import unittest.mock
from pathlib import Path

from gridtext._util.logging_utils import _log_debug


class LogDebugTests(unittest.TestCase):
    def test_appends_timestamped_lines(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with unittest.mock.patch.dict(os.environ, {"GRIDTEXT_STATE_DIR": td}):
                _log_debug("first")
                _log_debug("second")
            lines = (Path(td) / "gridtext.log").read_text(encoding="utf-8").splitlines()
            self.assertEqual(len(lines), 2)
            self.assertTrue(lines[0].startswith("["))
            self.assertTrue(lines[0].endswith("] first"))
            self.assertTrue(lines[1].endswith("] second"))

    def test_never_raises_on_unwritable_location(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            blocker = Path(td) / "file"
            blocker.write_text("", encoding="utf-8")
            with unittest.mock.patch.dict(os.environ, {"GRIDTEXT_STATE_DIR": str(blocker / "sub")}):
                _log_debug("ignored")
            self.assertFalse((blocker / "sub").exists())


if __name__ == "__main__":
    unittest.main()
