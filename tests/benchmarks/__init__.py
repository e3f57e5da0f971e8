"""Performance benchmarks for statewalk.

Benchmarks use pytest-benchmark to measure and track performance of critical operations.
Prevents performance regressions in dead-end analysis, walk generation and shrinking.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
