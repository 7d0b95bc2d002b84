"""Output stage.

This module renders transform outcomes onto standard output and error.
"""
