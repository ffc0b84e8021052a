"""Building blocks for a chess engine tournament manager: checksums, logging, pools and process bookkeeping."""

__version__ = "0.1.0"