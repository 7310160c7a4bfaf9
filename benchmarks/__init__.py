"""
Benchmark suite for jsonmend repair performance.

Compares jsonmend against other near-JSON repairers:
- json_repair (pure Python)

and, on already valid input, against strict parsers:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures repair speed and memory usage across different defect mixes.
"""
