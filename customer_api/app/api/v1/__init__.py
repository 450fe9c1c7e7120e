"""
Version 1 of the Customer API.
"""
