"""Deterministic artifact writers shared by the pack builders.

Archives, JSON files and digests are written with fixed metadata so that two
builds from the same inputs produce the same bytes.
"""

__all__: list[str] = [
    "archives",
    "hash_utils",
    "stable_json",
]
