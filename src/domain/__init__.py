"""Roles, the access policy, collection and profile types, and the ports
(protocols) that infrastructure implements. No framework imports.
"""
