"""Scaffold, run, benchmark and submit Advent of Code solutions."""

__version__ = "0.11.0"