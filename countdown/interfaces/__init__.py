"""
Protocols for the host primitives a Timer consumes.
"""
