"""
Foundation layer: errors, the keyed store, logging, clock and version helpers.
"""
