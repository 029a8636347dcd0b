"""Rigid-body and particle physics: vector maths, particles, forces, collision and a demo world."""

__version__ = "0.1.0"