"""Pydantic schemas for requests and derived rows.

Import from the submodules directly; the entity models import
`schemas.common`, so this package must stay free of eager imports.
"""
