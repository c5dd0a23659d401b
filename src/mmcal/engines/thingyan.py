"""
mmcal.engines.thingyan
----------------------
Thingyan (Myanmar New Year water festival) timing.

The atat moment, when the new year "rises", falls exactly one solar year
after the previous one. The akya moment, when the old year "falls", leads
it by a fixed span that was shortened slightly at the start of the third era.
Both moments are Julian dates in Myanmar local time, like the epoch they
are counted from.
"""

from __future__ import annotations

from typing import Tuple

from mmcal.core.config import MYANMAR_EPOCH, SOLAR_YEAR, THIRD_ERA_START
from mmcal.core.time import round_half_up
from mmcal.core.types import ThingyanWindow

AKYA_LEAD_THIRD_ERA = 2.169918982
AKYA_LEAD_EARLIER = 2.1675


def akya_lead(my: int) -> float:
    """Days from the akya moment to the atat moment in Myanmar year my."""
    return AKYA_LEAD_THIRD_ERA if my >= THIRD_ERA_START else AKYA_LEAD_EARLIER


def transition_moments(my: int) -> Tuple[float, float]:
    """(atat JD, akya JD) of the Thingyan that opens Myanmar year my."""
    ja = SOLAR_YEAR * my + MYANMAR_EPOCH
    jk = ja - akya_lead(my)
    return ja, jk


def festival_window(my: int) -> ThingyanWindow:
    """Festival days leading from year my - 1 into year my."""
    ja, jk = transition_moments(my)
    da = round_half_up(ja)
    dk = round_half_up(jk)

    # A second Akyat day only appears when the festival spans four days.
    akyat2 = da - 1 if da - dk > 2 else None

    return ThingyanWindow(
        year_from=my - 1,
        year_to=my,
        atat_time=ja,
        akya_time=jk,
        akyo_day=dk - 1,
        akya_day=dk,
        akyat_day=dk + 1,
        akyat_day2=akyat2,
        atat_day=da,
        new_year_day=da + 1,
    )
