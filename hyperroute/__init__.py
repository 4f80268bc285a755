"""Hyperliquid spot asset routing - Python Implementation."""

from hyperroute.routing.router import RouteFinder, find_route

__version__ = "0.1.0"
__all__ = ["RouteFinder", "find_route", "__version__"]
