"""
Test suite for ToothSearch teeth app
"""
