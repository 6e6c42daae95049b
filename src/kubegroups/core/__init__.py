"""
Core group discovery modules
"""
