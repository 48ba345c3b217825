"""
Small building blocks used throughout the package: handler lists and value object mixins.
"""
