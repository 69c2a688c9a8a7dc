"""
PhantomJS PDF Generator
=======================

Render HTML to PDF by driving a platform-specific PhantomJS executable
and its ``rasterize.js`` script as a subprocess.

This package provides:
- Environment-driven settings and structured logging
- Host platform detection and executable selection
- The ``PdfGenerator`` component and a ``phantom-pdf`` command line tool
"""

__version__ = "1.0.0"
__author__ = "PhantomJS PDF Team"
