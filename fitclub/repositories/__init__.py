"""
Persistence adapters.

``protocols`` describes what the use cases need from a store;
``sql_repository`` is the SQLAlchemy implementation of those contracts.
"""
