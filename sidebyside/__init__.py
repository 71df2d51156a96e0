"""Side-by-side comparison of search results from two scoring policies.

Formats queries against search backends, extracts normalized results,
fingerprints result lists, and records assessor judgments.
"""

__version__ = "1.0.0"
