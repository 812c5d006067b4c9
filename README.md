# crust

A small toolkit for and-inverter graphs (AIGs). It reads binary AIGER
files and enumerates k-feasible cuts, either for every node or for one
node. It can also write the graph as a Graphviz DOT file and render it
to PNG.

## Installation

```
pip install .
```

Rendering a PNG needs the Graphviz `dot` program on your `PATH`.

## Command line

```
crust --read-aiger circuit.aig [options]
```

| Option | Meaning |
| --- | --- |
| `-r`, `--read-aiger FILE` | Binary AIGER input file (required) |
| `-e`, `--cut-enumerate PATH` | Compute the cuts of all nodes and write them to `PATH` |
| `-c`, `--cut NODE` | Compute the cuts of a single node |
| `-o`, `--cut-output PATH` | Write the single-node result to `PATH` instead of printing it |
| `-k`, `--max-cut-size K` | Maximum number of leaves per cut (default 4) |
| `-v`, `--visualize PATH.png` | Write `PATH.dot` and render it with `dot` to `PATH.png` |
| `-V`, `--version` | Print the version and exit |

Parent directories of output files are created as needed. Cuts are
written with sorted leaves, for example `{3: [{1, 2}, {3}]}` for all
nodes or `[{1, 2}, {3}]` for one node. A node that is neither an input
nor part of the graph gives an empty list and a warning on stderr.

If the file cannot be read, is malformed, or `dot` cannot be started,
the command prints `Error: ...` to stderr and exits with status 1.

Examples:

```
crust -r adder.aig -e out/cuts.txt -k 3
crust -r adder.aig -c 7
crust -r adder.aig -v out/adder.png
```

## Library use

```python
from crust.aiger import read_aiger
from crust.cuts import CutEnumerator

aiger = read_aiger("adder.aig")
enumerator = CutEnumerator(aiger.aig)
enumerator.enumerate_cuts(4, aiger.inputs)
print(enumerator.cuts)

print(enumerator.calculate_cuts_single_node(3, aiger.inputs, 7))
```

- `crust.aig`: `Signal`, `AndNode` and `AIG`. `AIG.create_and` uses
  structural hashing and simplifies constants and `a AND a` /
  `a AND NOT a`; `AIG.topological_sort` orders variables so that fanins
  come before their nodes.
- `crust.aiger`: `read_aiger(filename)` and `parse_aiger(stream)` return
  an `AigerFile` with `aig`, `inputs` and `outputs`; malformed or
  truncated input raises `AigerError`. `read_leb` decodes one delta.
- `crust.cuts`: `CutEnumerator` and `filter_minimal_cuts`. Cuts are
  `frozenset`s of variable ids. Each node's list holds only minimal cuts
  (none is a proper subset of another), and the trivial cut `{node}`
  always comes last.
- `crust.visualizer`: `AigVisualizer(aig, base_path)` with `export_dot`
  and `export_png`; inverted edges are drawn dashed.

## Limitations

- Only the binary AIGER format (`aig` header) is read; the ASCII `aag`
  format is not, and nothing is written back as AIGER.
- Latches only shift the numbering of AND nodes; their definitions are
  not read, and symbol tables and comments are ignored.
- There is no limit on the number of cuts per node, only on cut size.