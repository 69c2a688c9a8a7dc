"""
Core Logic
==========

Modules:
- platform: Host operating system detection and executable selection
- rendering: PDF generation through the external rasterizer
"""
