"""Student Affairs (kesiswaan) package.

Organized by feature modules (accounts, profiles, students, identity, ...)
with a thin Flask JSON controller layer over service/repository layers.
"""
