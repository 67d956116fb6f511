"""
Static data for the reference synchronizer.

Fixed markdown bodies live in ``refsync.core.data.templates``; they are
plain module constants, loaded once at import.
"""
