"""Named indicator store that outlives individual script runs."""

from typing import Optional

import structlog

from ..data.models import IndicatorDescriptor


logger = structlog.get_logger(__name__)


class IndicatorRegistry:
    """Indicators keyed by name; adding an existing name replaces it."""

    def __init__(self):
        self._indicators: dict[str, IndicatorDescriptor] = {}
        self.logger = logger

    def add(self, descriptor: IndicatorDescriptor) -> None:
        """Insert or overwrite by name."""
        replaced = descriptor.name in self._indicators
        self._indicators[descriptor.name] = descriptor
        self.logger.debug("Indicator stored", indicator=descriptor.name, replaced=replaced)

    def remove(self, name: str) -> None:
        """Drop an indicator; unknown names are ignored."""
        if self._indicators.pop(name, None) is not None:
            self.logger.debug("Indicator removed", indicator=name)

    def clear(self) -> None:
        count = len(self._indicators)
        self._indicators.clear()
        self.logger.debug("Indicators cleared", count=count)

    def list(self) -> list[IndicatorDescriptor]:
        """All current descriptors."""
        return list(self._indicators.values())

    def get(self, name: str) -> Optional[IndicatorDescriptor]:
        return self._indicators.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._indicators

    def __len__(self) -> int:
        return len(self._indicators)
