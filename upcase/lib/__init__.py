"""
Library modules that are shared by all units: configuration and logging, exceptions, in-memory
streams, type helpers, and miscellaneous tools.
"""
