"""Date-based ISO-8601 period (``PnYnMnWnD``)."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

_PERIOD_PATTERN = re.compile(
    r"^(?P<sign>[+-]?)P"
    r"(?:(?P<years>[+-]?\d+)Y)?"
    r"(?:(?P<months>[+-]?\d+)M)?"
    r"(?:(?P<weeks>[+-]?\d+)W)?"
    r"(?:(?P<days>[+-]?\d+)D)?$",
    re.IGNORECASE,
)


class Period(BaseModel):
    """An amount of calendar time in years, months and days.

    Unlike :class:`datetime.timedelta` a period keeps months and years
    symbolic, so ``P1M`` means "one month" whatever the month length.
    Weeks are folded into days.
    """

    model_config = ConfigDict(frozen=True)

    years: int = 0
    months: int = 0
    days: int = 0

    @classmethod
    def parse(cls, text: str) -> Period:
        """Parse an ISO-8601 period such as ``P1Y2M3D`` or ``-P2W``.

        Raises ``ValueError`` when *text* is not a date-based period.
        """
        match = _PERIOD_PATTERN.match(text.strip())
        if match is None or not any(match.group(part) for part in ("years", "months", "weeks", "days")):
            raise ValueError(f"invalid ISO-8601 period: {text!r}")
        factor = -1 if match.group("sign") == "-" else 1

        def _part(name: str) -> int:
            raw = match.group(name)
            return int(raw) * factor if raw else 0

        return cls(
            years=_part("years"),
            months=_part("months"),
            days=_part("weeks") * 7 + _part("days"),
        )

    def isoformat(self) -> str:
        if self == ZERO_PERIOD:
            return "P0D"
        parts = ["P"]
        if self.years:
            parts.append(f"{self.years}Y")
        if self.months:
            parts.append(f"{self.months}M")
        if self.days:
            parts.append(f"{self.days}D")
        return "".join(parts)


ZERO_PERIOD = Period()
