"""Health scoring package.

This module contains:
- The score calculator used by the entry repository on every write
- Descriptive labels for scores and per-metric measurements
- Insight and trend builders over a user's recent entries

Everything here is pure: callers pass entries and dates in, nothing reads
the store or the clock.
"""

from .engine import calculate_overall_score, round_half_up
