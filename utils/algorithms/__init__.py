"""
Pure algorithms with no I/O.

Modules:
    cliques     - Clique and celebrity clique predicates and finders
    matrix      - Acquaintance matrix view (numpy / scipy)
    sets        - Set operations (power set, binomial coefficients)
"""
