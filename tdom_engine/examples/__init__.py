"""
Runnable examples for the tree engine.
"""
