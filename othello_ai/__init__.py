"""Othello rules engine and scripted AI opponent."""

__version__ = "0.1.0"
