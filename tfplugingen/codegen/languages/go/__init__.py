"""
Go output for Terraform Plugin Framework providers.

Literal formatting, conversion plan types and the Jinja2 templates used for
custom types and To/From helper functions.
"""
