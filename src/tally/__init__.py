"""
Tally - hyphen-grouped letter/number counter

A small library and CLI for counters such as "H5-T3-Z9".
"""

__version__ = "0.1.0"

# Re-export core models for convenience
from tally.core.config.models import TallyConfig
from tally.core.digits import Counter, CounterParseError, parse_counter

__all__ = ["Counter", "CounterParseError", "TallyConfig", "parse_counter", "__version__"]
