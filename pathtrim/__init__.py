"""
pathtrim - trim-path toolkit for video templates

Maps fractional arc-length positions on Bezier paths to curve times and
splits composite paths at those positions.
"""

__version__ = "0.1.0"
