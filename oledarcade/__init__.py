"""Tiny arcade console (car dodger, pong, record table) on a simulated 128x64 monochrome display."""

__version__ = "0.1.4"