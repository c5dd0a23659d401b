"""
mmcal.attributes.astro
----------------------
Traditional astrological day classifications.

Each predicate is an independent closed-form rule over (month, weekday),
(day, weekday) or (month, day); weekdays run 0=Saturday .. 6=Friday and
months use the Myanmar numbering (0 = First Waso, 13/14 = late months).
Where a rule is defined on the twelve ordinary months, First Waso counts
as Waso and the late months count as Tagu and Kason.
"""

from __future__ import annotations

from typing import List, Tuple

from mmcal.core.types import AstroFlagSet
from mmcal.engines.clock import weekday
from mmcal.engines.myanmar import fortnight_day, jdn_to_myanmar, month_length
from mmcal.core.time import round_half_up

SABBATH_NAMES: Tuple[str, ...] = ("", "Sabbath", "Sabbath Eve")
PYATHADA_NAMES: Tuple[str, ...] = ("", "Pyathada", "Afternoon Pyathada")
NAGAHLE_NAMES: Tuple[str, ...] = ("West", "North", "East", "South")
MAHABOTE_NAMES: Tuple[str, ...] = ("Binga", "Atun", "Yaza", "Adipati", "Marana", "Thike", "Puti")
NAKHAT_NAMES: Tuple[str, ...] = ("Ogre", "Elf", "Human")


def _ordinary_month(mm: int) -> int:
    """Fold late months onto Tagu/Kason and First Waso onto Waso (1..12)."""
    mmt = mm // 13
    mm = mm % 13 + mmt
    return 4 if mm <= 0 else mm


# ---------------------------------------------------------
# Month / weekday rules
# ---------------------------------------------------------

def sabbath(md: int, mm: int, myt: int) -> int:
    """1 on sabbath (8th, 15th, 23rd, last day), 2 on the eve before, else 0."""
    mml = month_length(mm, myt)
    s = 0
    if md in (8, 15, 23) or md == mml:
        s = 1
    if md in (7, 14, 22) or md == mml - 1:
        s = 2
    return s


def yatyaza(mm: int, wd: int) -> bool:
    m1 = mm % 4
    wd1 = m1 // 2 + 4
    wd2 = (1 - m1 // 2 + m1 % 2) * (1 + 2 * (m1 % 2))
    return wd == wd1 or wd == wd2


_PYATHADA_MONTHS = (1, 3, 3, 0, 2, 1, 2)

def pyathada(mm: int, wd: int) -> int:
    """1 for pyathada, 2 for afternoon pyathada, else 0."""
    m1 = mm % 4
    p = 0
    if m1 == 0 and wd == 4:
        p = 2
    if m1 == _PYATHADA_MONTHS[wd]:
        p = 1
    return p


def nagahle(mm: int) -> int:
    """Direction of the dragon's head: 0 west, 1 north, 2 east, 3 south."""
    if mm <= 0:
        mm = 4
    return (mm % 12) // 3


def mahabote(my: int, wd: int) -> int:
    return (my - wd) % 7


def nakhat(my: int) -> int:
    return my % 3


def thamanyo(mm: int, wd: int) -> bool:
    mm = _ordinary_month(mm)
    m1 = mm - 1 - mm // 9
    wd1 = (m1 * 2 - m1 // 8) % 7
    return (wd + 7 - wd1) % 7 <= 1


# ---------------------------------------------------------
# Day / weekday rules (on the fortnight day unless noted)
# ---------------------------------------------------------

_AMYEITTASOTE = (5, 8, 3, 7, 2, 4, 1)
_WARAMEITTUGYI = (7, 1, 4, 8, 9, 6, 3)
_YATPOTE = (8, 1, 4, 6, 9, 8, 7)
_THAMAPHYU_A = (1, 2, 6, 6, 5, 6, 7)
_THAMAPHYU_B = (0, 1, 0, 0, 0, 3, 3)
_NAGAPOR_A = (26, 21, 2, 10, 18, 2, 21)  # day of the month
_NAGAPOR_B = (17, 19, 1, 0, 9, 0, 0)


def amyeittasote(md: int, wd: int) -> bool:
    return fortnight_day(md) == _AMYEITTASOTE[wd]


def warameittugyi(md: int, wd: int) -> bool:
    return fortnight_day(md) == _WARAMEITTUGYI[wd]


def warameittunge(md: int, wd: int) -> bool:
    return 12 - fortnight_day(md) == (wd + 6) % 7


def yatpote(md: int, wd: int) -> bool:
    return fortnight_day(md) == _YATPOTE[wd]


def thamaphyu(md: int, wd: int) -> bool:
    mf = fortnight_day(md)
    return mf == _THAMAPHYU_A[wd] or mf == _THAMAPHYU_B[wd] or (mf == 4 and wd == 5)


def nagapor(md: int, wd: int) -> bool:
    if md == _NAGAPOR_A[wd] or md == _NAGAPOR_B[wd]:
        return True
    return (md == 2 and wd == 1) or (md in (12, 4, 18) and wd == 2)


# ---------------------------------------------------------
# Month / day rules
# ---------------------------------------------------------

_SHANYAT = (8, 8, 2, 2, 9, 3, 3, 5, 1, 4, 7, 4)


def yatyotema(mm: int, md: int) -> bool:
    mm = _ordinary_month(mm)
    m1 = mm if mm % 2 else (mm + 9) % 12
    m1 = (m1 + 4) % 12 + 1
    return fortnight_day(md) == m1


def mahayatkyan(mm: int, md: int) -> bool:
    if mm <= 0:
        mm = 4
    m1 = ((mm % 12) // 2 + 4) % 6 + 1
    return fortnight_day(md) == m1


def shanyat(mm: int, md: int) -> bool:
    mm = _ordinary_month(mm)
    return fortnight_day(md) == _SHANYAT[mm - 1]


# ---------------------------------------------------------
# Per-day summaries
# ---------------------------------------------------------

_DAY_RULES = (
    ("Thamanyo", lambda mm, md, wd: thamanyo(mm, wd)),
    ("Amyeittasote", lambda mm, md, wd: amyeittasote(md, wd)),
    ("Warameittugyi", lambda mm, md, wd: warameittugyi(md, wd)),
    ("Warameittunge", lambda mm, md, wd: warameittunge(md, wd)),
    ("Yatpote", lambda mm, md, wd: yatpote(md, wd)),
    ("Thamaphyu", lambda mm, md, wd: thamaphyu(md, wd)),
    ("Nagapor", lambda mm, md, wd: nagapor(md, wd)),
    ("Yatyotema", lambda mm, md, wd: yatyotema(mm, md)),
    ("Mahayatkyan", lambda mm, md, wd: mahayatkyan(mm, md)),
    ("Shanyat", lambda mm, md, wd: shanyat(mm, md)),
)


def astro_days(jdn: float) -> List[str]:
    """Names of the astrological day categories that apply to jdn, in fixed order."""
    jdn = round_half_up(jdn)
    d = jdn_to_myanmar(jdn)
    wd = weekday(jdn)
    return [name for name, rule in _DAY_RULES if rule(d.month, d.day, wd)]


def astro_flags(jdn: float) -> AstroFlagSet:
    jdn = round_half_up(jdn)
    d = jdn_to_myanmar(jdn)
    wd = weekday(jdn)
    mm, md, myt = d.month, d.day, int(d.year_type)
    return AstroFlagSet(
        sabbath=SABBATH_NAMES[sabbath(md, mm, myt)],
        yatyaza="Yatyaza" if yatyaza(mm, wd) else "",
        pyathada=PYATHADA_NAMES[pyathada(mm, wd)],
        nagahle=NAGAHLE_NAMES[nagahle(mm)],
        mahabote=MAHABOTE_NAMES[mahabote(d.year, wd)],
        nakhat=NAKHAT_NAMES[nakhat(d.year)],
        thamanyo=thamanyo(mm, wd),
        amyeittasote=amyeittasote(md, wd),
        warameittugyi=warameittugyi(md, wd),
        warameittunge=warameittunge(md, wd),
        yatpote=yatpote(md, wd),
        thamaphyu=thamaphyu(md, wd),
        nagapor=nagapor(md, wd),
        yatyotema=yatyotema(mm, md),
        mahayatkyan=mahayatkyan(mm, md),
        shanyat=shanyat(mm, md),
    )
