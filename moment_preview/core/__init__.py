"""
Core functionality for the Moment Preview service.

This package contains the payload validator and the normalizer that
builds the summary and normalized structures returned by the API.
"""
