from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FailureLog:
	"""Logs the first failure per side and counts the ones it suppresses.

	Callbacks run every tick over every loaded creature, so a single broken
	creature would otherwise flood the log.
	"""

	_logged: Dict[str, bool] = field(default_factory=dict, repr=False)
	_suppressed: Dict[str, int] = field(default_factory=dict, repr=False)

	def report(self, side: str, label: str, exc: BaseException) -> bool:
		"""Record a failure; returns True when it was actually logged."""
		if self._logged.get(side):
			self._suppressed[side] = self._suppressed.get(side, 0) + 1
			return False
		self._logged[side] = True
		logger.error("[tint] %s %s failed: %s", side, label, exc, exc_info=exc)
		return True

	def has_logged(self, side: str) -> bool:
		return bool(self._logged.get(side))

	def suppressed(self, side: str) -> int:
		return self._suppressed.get(side, 0)

	def reset(self) -> None:
		self._logged.clear()
		self._suppressed.clear()
