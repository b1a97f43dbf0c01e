"""
tests.unit
==========

Fast, offline unit and property tests for codechain_sdk.
"""
