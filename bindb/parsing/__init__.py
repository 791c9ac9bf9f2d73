"""
Parsing and decoding of binary payloads.

Sub-packages handle specific data formats:

- ``database``: tagged binary database records.
"""
