"""
Campaign Client Contract Module

This module contains:
- data_contract.py: Test data factories for campaign state, profile
  attributes and tracking parameters
"""
