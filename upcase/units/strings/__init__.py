"""
Units that operate on the input as text.
"""
