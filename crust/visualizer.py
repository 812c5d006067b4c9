"""Export of an and-inverter graph to Graphviz DOT and PNG."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Iterator, Sequence
from os import PathLike
from pathlib import Path

from crust.aig import AIG, Signal


class AigVisualizer:
    """Writes a graph as DOT files into ``base_path`` and renders them with ``dot``."""

    def __init__(self, aig: AIG, base_path: str | PathLike[str]) -> None:
        self.aig = aig
        self.base_path = Path(base_path)

    def _dot_lines(self, inputs: Sequence[Signal], outputs: Sequence[Signal]) -> Iterator[str]:
        yield "digraph AIG {"
        yield "  rankdir=LR;"
        yield "  node [shape=circle];"

        for signal in inputs:
            yield (
                f'  x{signal.index} [label="x{signal.index}", shape=box, '
                "style=filled, fillcolor=lightblue];"
            )

        for index, node in self.aig.node_map.items():
            yield f'  x{index} [label="x{index}"];'
            for fanin in (node.left_signal, node.right_signal):
                style = "dashed" if fanin.inverted else "solid"
                yield f"  x{fanin.index} -> x{index} [style={style}];"

        for i, output in enumerate(outputs):
            style = "dashed" if output.inverted else "solid"
            negation = "¬" if output.inverted else ""
            label = f"f{i} = {negation}x{output.index}"
            yield f'  f{i} [label="{label}", shape=diamond, style=filled, fillcolor=lightgreen];'
            yield f"  x{output.index} -> f{i} [style={style}];"

        yield "}"

    def export_dot(
        self, filename: str, inputs: Sequence[Signal], outputs: Sequence[Signal]
    ) -> Path:
        """Write ``<base_path>/<filename>.dot`` and return its path."""
        path = self.base_path / f"{filename}.dot"
        with open(path, "w", encoding="utf-8") as file:
            for line in self._dot_lines(inputs, outputs):
                file.write(line + "\n")
        return path

    def export_png(
        self, filename: str, inputs: Sequence[Signal], outputs: Sequence[Signal]
    ) -> bool:
        """Write the DOT file and render ``<base_path>/<filename>.png``.

        Returns whether ``dot`` succeeded; raises ``OSError`` if it cannot be run.
        """
        dot_file = self.export_dot(filename, inputs, outputs)
        png_file = self.base_path / f"{filename}.png"
        try:
            completed = subprocess.run(
                ["dot", "-Tpng", str(dot_file), "-o", str(png_file)], check=False
            )
        except OSError as exc:
            raise OSError(f"Failed to execute dot command: {exc}") from exc

        if completed.returncode == 0:
            print("Image successfully created!")
            return True
        print(f"dot-error: exit status {completed.returncode}", file=sys.stderr)
        return False