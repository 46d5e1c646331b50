"""
pygame adapters. THIN - no game logic here.
"""
