"""Directory tree listings, snapshots, version comparison and suspect-file screening."""

__version__ = "0.1.0"