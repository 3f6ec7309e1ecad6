"""
Jekyll migrators and helpers.

This subpackage decides where each imported article goes in the Jekyll
tree, normalizes comment and date values for the front matter, and
writes documents atomically so that an interrupted run leaves no
half-written file behind.
"""
