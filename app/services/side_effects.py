"""Best-effort steps that follow an already committed record mutation.

Category count adjustments and image deletions run after the primary write.
A failing step is logged and reported back as a warning; it never undoes the
primary write.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List

logger = logging.getLogger(__name__)


@dataclass
class SideEffectLog:
    """Collects warnings of failed follow-up steps for the response payload."""

    warnings: List[str] = field(default_factory=list)

    def attempt(self, description: str, action: Callable[[], Any]) -> bool:
        """Run ``action``; on failure log it, record a warning and return False."""
        try:
            action()
        except Exception as e:
            logger.error(f"Side effect failed: {description}: {e}", exc_info=True)
            self.warnings.append(f"{description} failed")
            return False
        return True
