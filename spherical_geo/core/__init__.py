"""Core utilities and shared infrastructure.

- config: Decoder configuration loading and validation
- constants: Earth radius, wire-format layout, named limits
- exceptions: Custom exception hierarchy
"""
