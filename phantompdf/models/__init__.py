"""
Data Models
===========

Pydantic models for generator options, generation requests and results.
"""
