"""
Configuration module.

Frozen defaults, YAML preset loading with layered overrides, and
validation of configuration sections.
"""
