"""Test suite for conespan.

- tests/test_utils/   : Direction and polynomial leaf helpers
- tests/test_engine/  : kernels, strategies and strategy selection
- tests/test_cli/     : settings and the command-line demo
"""
