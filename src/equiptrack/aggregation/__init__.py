"""Aggregation module for equipment reports and charts.

- Pure functions over entry lists: sums, group-bys, rankings, shares
- Forbidden: storage access, CSV parsing
"""
