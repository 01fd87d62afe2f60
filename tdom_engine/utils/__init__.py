"""
Utility modules for the tree engine: logging setup and configuration.
"""
