"""I/O utilities for yapSCAD."""

from .scad import InvokerError, ScadInvoker, scad_text, write_scad

__all__ = ['InvokerError', 'ScadInvoker', 'scad_text', 'write_scad']
