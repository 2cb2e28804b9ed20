"""
Thin pygame adapters: drawing and keyboard translation.
"""
