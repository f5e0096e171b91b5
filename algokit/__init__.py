"""Adjacency-matrix graphs, spanning trees, shortest paths, search trees and hash tables."""

__version__ = "0.1.0"