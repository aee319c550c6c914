"""Containers for electromagnetic physics tables, table slicing helpers and JSON I/O."""

__version__ = "0.1.0"

__all__ = [
    "data",
    "electron",
    "electron_eloss",
    "electron_xsec",
    "elements",
    "gamma",
    "jsonio",
    "matcut",
    "materials",
    "parameters",
    "sbtable",
]