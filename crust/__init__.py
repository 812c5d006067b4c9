"""And-inverter graphs: binary AIGER reading, k-feasible cut enumeration and Graphviz export."""

__version__ = "0.1.0"