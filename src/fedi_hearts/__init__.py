"""Fediverse emoji packs for the Celeste pride hearts.

One build writes a Mastodon tar, a Misskey zip with ``meta.json`` and the
Akkoma/Pleroma mapping and manifest files.
"""

__version__ = "1.0.0"

__all__: list[str] = [
    "artifacts",
    "cli",
    "config",
    "hearts_list",
    "naming",
    "pipeline",
    "records",
    "staging",
]
