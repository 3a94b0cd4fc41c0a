"""
edmwire: Edm typed values on the table storage wire

Converts the eight Edm primitive types to and from the text they take in
write-request bodies and in query filter literals, and rejects any type
tag outside that closed set before a request is ever built.
"""

__version__ = "0.1.0"
