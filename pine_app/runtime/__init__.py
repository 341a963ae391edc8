"""
Script runtime.

Value union, elementwise operator rules, tree evaluation and the indicator
registry.
"""
