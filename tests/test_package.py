# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""End-to-end checks through the top-level package API."""

import unittest

import gridtext


class PackageApiTests(unittest.TestCase):
    def test_version_is_a_string(self) -> None:
        self.assertIsInstance(gridtext.__version__, str)

    def test_width_examples(self) -> None:
        self.assertEqual(gridtext.display_width("Hello中文"), 9)
        self.assertEqual(gridtext.display_width("\U0001f468\u200d\U0001f4bb"), 4)
        self.assertEqual(gridtext.display_width("⚠"), 1)
        self.assertEqual(gridtext.display_width("⚠" + chr(gridtext.VS16)), 2)

    def test_draw_example(self) -> None:
        canvas = gridtext.mk_canvas(10, 1)
        gridtext.draw_text(canvas, 0, 0, "中文")
        self.assertEqual(
            [col[0] for col in canvas[:5]],
            ["中", gridtext.PAD, "文", gridtext.PAD, gridtext.BLANK],
        )
        self.assertEqual(gridtext.canvas_to_string(canvas), "中文")


if __name__ == "__main__":
    unittest.main()
