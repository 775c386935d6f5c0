"""SRP-6a password-authenticated key exchange.

Import the pieces from their modules, e.g. ``from pysrp6a.client import
ClientSession``.
"""
