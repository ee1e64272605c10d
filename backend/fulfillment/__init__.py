"""
Fulfillment Service - order processing with per-category stock rules
"""
__version__ = "1.0.0"
