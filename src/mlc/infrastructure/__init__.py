"""
NumPy-backed implementations of the MLC runtime.
"""
