"""
Keyword catalog: the application's vocabularies in one table.

Exports KEYWORDS, the merged read-only key → Entry table of every registry
declared in the trading and general domain modules. Building it at import
time surfaces duplicate keys at startup.
"""

from vocab.catalog import general, trading
from vocab.table import merge_registries

REGISTRIES = trading.REGISTRIES + general.REGISTRIES

KEYWORDS = merge_registries(REGISTRIES)
