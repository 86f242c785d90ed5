"""
Core module - configuration, logging setup and error types.
"""
