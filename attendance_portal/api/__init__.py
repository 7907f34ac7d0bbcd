"""
HTTP layer: the API gateway and the typed per-resource clients.
"""
