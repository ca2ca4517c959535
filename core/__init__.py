"""
User-Agent classification engine.
"""
