"""
DrD+ person package.

This package contains the person aggregate of the DrD+ rules engine, together
with the shared core utilities (constants, logging, console output) it relies
on.
"""
