"""Home-care dashboard notification center package.

Ensures the local ``homecare`` package is resolved as a regular package
instead of a namespace package.
"""
