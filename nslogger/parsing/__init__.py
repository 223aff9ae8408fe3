"""
This package contains all modules related to parsing and decoding NSLogger
binary log streams.

Sub-packages handle specific layers of the format:

- ``parts``: Part keys, types and the single-part decoder.
- ``stream``: Message framing and whole-stream decoding.
- ``messages``: Message construction for producers and fixtures.
"""
