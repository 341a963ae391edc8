"""
Price input and indicator output models.

Handles conversion of caller-supplied bars into PriceBar objects and defines
the indicator descriptors a script run returns.
"""
