"""Input/output helpers for the command line.

This subpackage retrieves the raw transcript text, decoupling its
source (argument, pipe or file) from the parser.
"""
