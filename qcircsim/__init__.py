"""Simulate small quantum circuits given as gate matrices and a state vector."""

__version__ = "0.1.0"