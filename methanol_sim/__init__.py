"""Simulated SOEC-fed CO2-to-methanol process dashboard."""

__version__ = "0.1.0"
