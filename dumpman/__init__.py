"""
dumpman - group the media of a camera dump into named output directories.
"""

__version__ = "0.1.0"
