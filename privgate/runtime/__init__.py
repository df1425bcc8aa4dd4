"""
Runtime: the permission gate, its registry and the broker adapter.
"""
