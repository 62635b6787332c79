"""Sistema da Padaria - bakery catalog management.

Categories and products live in in-memory stores behind abstract store
contracts; controllers validate and mediate every catalog operation.
"""

__version__ = "0.1.0"
