"""
Test Fixtures - Example Flow Elements and Settings.

This package contains reusable test fixtures:
    - elements.py: Example flow elements (value, stop, error, SetHeader)
    - sample_settings.yaml: Sample settings file

Usage:
    Import fixtures in test files via pytest fixtures or direct import.
"""
