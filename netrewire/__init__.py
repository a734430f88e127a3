"""Degree-preserving, connectivity-preserving network randomization."""
