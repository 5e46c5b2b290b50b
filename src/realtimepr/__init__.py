"""realtimepr: Line-oriented source review with an import dependency analyzer."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
