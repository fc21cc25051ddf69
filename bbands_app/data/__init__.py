"""
Market data module.

Bar model, host record parsing, series validation and a synthetic
series generator.
"""
