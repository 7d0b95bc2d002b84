"""Line ingestion stage.

This module reads standard input or an ordered list of files
into a single in-memory line sequence for the transform stage.
"""
