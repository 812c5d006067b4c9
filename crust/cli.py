"""Command line interface: read an AIGER file, enumerate cuts, draw the graph."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from crust import __version__
from crust.aiger import AigerError, read_aiger
from crust.cuts import CutEnumerator
from crust.visualizer import AigVisualizer


def _format_cut(cut: Iterable[int]) -> str:
    return "{" + ", ".join(str(leaf) for leaf in sorted(cut)) + "}"


def _format_cut_list(cuts: Iterable[Iterable[int]]) -> str:
    return "[" + ", ".join(_format_cut(cut) for cut in cuts) + "]"


def format_cuts(cuts) -> str:
    """Render a cut list, or a mapping from node id to cut lists, as text.

    Leaves within a cut are sorted; mapping keys keep their order.
    """
    if isinstance(cuts, Mapping):
        entries = (f"{node}: {_format_cut_list(node_cuts)}" for node, node_cuts in cuts.items())
        return "{" + ", ".join(entries) + "}"
    return _format_cut_list(cuts)


def _non_negative(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text!r}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="crust", description="AIG Processing Tool")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-r", "--read-aiger", required=True, help="AIGER input file")
    parser.add_argument("-e", "--cut-enumerate", help="calculate cuts for all nodes")
    parser.add_argument("-c", "--cut", type=_non_negative, help="calculate cuts for a single node")
    parser.add_argument("-v", "--visualize", help="Enable graph visualization")
    parser.add_argument(
        "-k",
        "--max-cut-size",
        type=_non_negative,
        default=4,
        help="Maximum cut size (optional, default = 4)",
    )
    parser.add_argument("-o", "--cut-output", help="Optional output path for single node cut result")
    return parser


def _write_text(path: str, text: str) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text + "\n", encoding="utf-8")


def _run(args: argparse.Namespace) -> None:
    parsed = read_aiger(args.read_aiger)
    aig = parsed.aig

    if args.visualize is not None:
        full_path = Path(args.visualize)
        output_dir = full_path.parent
        stem = full_path.stem
        AigVisualizer(aig, output_dir).export_png(stem, parsed.inputs, parsed.outputs)
        print(f"Graph visualized at {output_dir}/{stem}.png")

    if args.cut_enumerate is not None:
        enumerator = CutEnumerator(aig)
        enumerator.enumerate_cuts(args.max_cut_size, parsed.inputs)
        _write_text(args.cut_enumerate, format_cuts(enumerator.cuts))
        print(f"Cuts written to {args.cut_enumerate}")

    if args.cut is not None:
        target = args.cut
        cuts = CutEnumerator(aig).calculate_cuts_single_node(
            args.max_cut_size, parsed.inputs, target
        )
        if args.cut_output is not None:
            _write_text(args.cut_output, format_cuts(cuts))
            print(f"Cuts for node {target} written to {args.cut_output}")
        else:
            print(f"Cuts for node {target}: {format_cuts(cuts)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    args = _build_parser().parse_args(argv)
    try:
        _run(args)
    except (OSError, AigerError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())