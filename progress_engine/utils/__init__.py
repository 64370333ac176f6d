# File: utils/__init__.py
"""Pure Python utilities for the progress engine.

This module contains pure functions with ZERO imports from the rest of the
package, so they can be reused by engines without circular imports.

⚠️ UTILS PURITY: NO `progress_engine.const` or `progress_engine.engines` imports.

Submodules:
    - dt_utils: Timestamp parsing, durations, relative phrasing
    - math_utils: Half-up rounding, floor multipliers, percentages

Usage:
    from . import dt_utils
    from .math_utils import round_score
"""

from . import dt_utils, math_utils

__all__ = ["dt_utils", "math_utils"]
