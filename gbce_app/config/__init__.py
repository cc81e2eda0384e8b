"""Configuration defaults, loading and validation"""
