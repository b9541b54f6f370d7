"""
Core Package.

Contains the generation pipeline:
- Data models and errors
- Symbol name derivation
- SVG parsing and JSX fragment conversion
- Output renderers and the package generator
"""
