"""
Command line entrypoints.
"""
