"""Corewar virtual machine: load compiled champions into an arena and step their processes."""

__version__ = "0.1.0"