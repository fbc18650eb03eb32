"""
Backend Scripts Module

Utility scripts for database setup.

Available scripts:
    - seed_data.py: Creates indexes and seeds the status / vehicle class catalogs

Usage:
    python -m scripts.seed_data
"""
