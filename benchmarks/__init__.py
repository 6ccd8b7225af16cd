"""
Benchmark suite for ldjson encoding and decoding.

Compares LD against the JSON codecs on identical value trees:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures speed and memory usage across different data shapes.
"""
