"""Graph store and search-time views.

This package provides the strict multi-directed graph type `StrictMultiDiGraph`,
the masked `GraphAdapter` used during path searches, and edge-list conversion
helpers (`convert`).
"""
