#!/usr/bin/env python3
"""
Print the chart of a major key: scale, diatonic chords and harmonic functions.

    python -m plat_computer.print_key_chart --key Sib
    python -m plat_computer.print_key_chart --key 3 --notation english
"""

import argparse
import sys

from fifths_wheel import KeyChart, Notation, chromatic_to_fifths, pitch_class_of


def parse_key(value):
    """Accept a sector index (0-11, wrapped) or a note name in either notation."""
    try:
        return int(value) % 12
    except ValueError:
        pass
    pitch_class = pitch_class_of(value)
    if pitch_class is None:
        raise argparse.ArgumentTypeError(f"unknown key '{value}'")
    return chromatic_to_fifths(pitch_class)


def format_chart(chart):
    """Render a KeyChart as plain text lines."""
    lines = [chart.get_title(), ""]

    for numeral, name in chart.get_scale():
        lines.append(f"  {numeral:<4} {name}")
    lines.append("")

    chords = chart.get_all_chords()
    lines.append(" ".join(f"{numeral:<6}" for _, _, numeral in chords).rstrip())
    lines.append(" ".join(f"{symbol:<6}" for _, symbol, _ in chords).rstrip())
    lines.append("")

    lines.append(chart.get_caption())
    return lines


def main(argv=None):
    parser = argparse.ArgumentParser(description="Show a major key from the circle of fifths.")
    parser.add_argument("--key", type=parse_key, default=0, help="Sector index or note name (default: Do/C)")
    parser.add_argument("--notation", choices=Notation.ALL, default=Notation.DEFAULT)
    args = parser.parse_args(argv)

    chart = KeyChart(args.key, args.notation)
    for line in format_chart(chart):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
