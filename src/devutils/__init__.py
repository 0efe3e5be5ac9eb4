"""devutils: JSON formatting and timestamp conversion with input history.

Two deterministic tools share one shape: parse loosely formatted text,
render canonical representations, and remember recent accepted inputs in
a bounded ledger persisted to a key-value blob store.
"""

__version__ = "0.1.0"
