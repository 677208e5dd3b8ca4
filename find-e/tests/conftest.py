"""
pytest configuration for the find E tests.
- Adds find-e/ to sys.path so the flat modules import without installation.
"""
import os
import sys

_tests_dir = os.path.dirname(__file__)
sys.path.insert(0, os.path.join(_tests_dir, ".."))   # find-e/
