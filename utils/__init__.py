"""
Helpers around the celebrity clique algorithms: loading, display, graphs.
"""
