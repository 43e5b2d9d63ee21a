"""
Pet adoption marketplace API.
"""
