from __future__ import annotations

import argparse

from commentwrap.model import Applied, Selection
from commentwrap.pipeline import ReflowConfig, reflow
from commentwrap.utils.logging import setup_logger


SAMPLE = """\
import Foundation

/// Wrap an array of lines. The lines are joined with single spaces and then broken again at the last space that fits.
/// Paragraph breaks are kept.
///
/// Returns the wrapped lines.
func wrapLines(_ lines: [String], to width: Int) -> [String] {
    /*
       Multi-line comment bodies without a marker on each line can be wrapped as
       well, as long as the opening and closing markers are on their own lines.
     */
    return []
}
"""


def main():
    p = argparse.ArgumentParser(description="Demo runner for commentwrap")
    p.add_argument("--width", type=int, default=80, help="Total line width")
    p.add_argument("--log-level", default="DEBUG", help="Log level")
    args = p.parse_args()

    setup_logger(args.log_level)
    lines = SAMPLE.splitlines()
    selections = [
        Selection.lines(2, 2),  # doc comment, expands over the next line
        Selection.lines(8, 9),  # body of the block comment
        Selection.lines(0, 2),  # code and comment together: skipped
    ]
    print(f"[demo] width={args.width}")
    results = reflow(lines, selections, ReflowConfig(width=args.width))
    for sel, res in zip(selections, results):
        status = "applied" if isinstance(res, Applied) else f"skipped ({res.reason.value})"
        print(f"[demo] lines {sel.start_line + 1}-{sel.end_line + 1}: {status}")
    print("\n".join(lines))


if __name__ == "__main__":
    main()
