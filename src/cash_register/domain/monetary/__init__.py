"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies
in the cash register, including Currency definitions and Money calculations
with half-up rounding to the currency precision.
"""
