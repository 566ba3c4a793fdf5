"""Workflow builder API: persists node/edge graphs and simulates their execution."""

__version__ = "0.1.0"
