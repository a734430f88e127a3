"""Network container, edge index, frontier probe, and network I/O."""

from netrewire.graph.edge_index import EdgeIndex
from netrewire.graph.frontier import FrontierProbe, probe, probe_pair
from netrewire.graph.io import (
    load_network,
    read_edge_list,
    save_network,
    write_edge_list,
)
from netrewire.graph.network import EMPTY, Network

__all__ = [
    "EMPTY",
    "EdgeIndex",
    "FrontierProbe",
    "Network",
    "load_network",
    "probe",
    "probe_pair",
    "read_edge_list",
    "save_network",
    "write_edge_list",
]
