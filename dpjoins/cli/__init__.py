"""
Command-line interface for dpjoins.
"""
