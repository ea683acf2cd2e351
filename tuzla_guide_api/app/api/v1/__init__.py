"""
Version 1 of the guide API.

Routes for the attraction catalog, reviews, payments, the caller's
profile and service information.
"""
