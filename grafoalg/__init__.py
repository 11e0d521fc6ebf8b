"""Graph algorithms: shortest distances, strongly connected components, minimum spanning trees and an edge check."""

__version__ = "0.1.0"