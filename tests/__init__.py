"""
Test Suite
==========

Test suite matching the phantompdf/ package structure.

Test Categories:
- unit: Unit tests for individual components, subprocess mocked
- integration: Runs against a fake rasterizer script on POSIX hosts
"""
