"""gray_code.core — Foundation layer.

Contains the width model, scalar and array bit primitives, and environment
configuration. This module has NO dependencies on gray_code.gray or
gray_code.registry. Only stdlib and numpy are allowed here.
"""
