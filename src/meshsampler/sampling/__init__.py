"""
The SAMPLING layer: range filtering, area weighting and point rejection.
"""
