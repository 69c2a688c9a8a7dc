"""
Rendering Module
===============

PDF creation by spawning the PhantomJS rasterizer.

Components:
- pdf_generator: Temp file handling, command assembly and process execution
"""
