"""
Layered configuration files, validated against a schema.
"""
