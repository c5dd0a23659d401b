from __future__ import annotations
from typing import Any, Dict

from ..core.types import DayInfo
from ..engines.holidays import other_holidays, public_holidays
from ..engines.myanmar import sasana_year as _sasana_year, year_name as _year_name
from ..engines.thingyan import festival_window
from . import astro as _astro
from .registry import register_attribute


def sabbath(info: DayInfo) -> Dict[str, Any]:
    d = info.myanmar
    return {"sabbath": _astro.SABBATH_NAMES[_astro.sabbath(d.day, d.month, int(d.year_type))]}

def yatyaza(info: DayInfo) -> Dict[str, Any]:
    return {"yatyaza": "Yatyaza" if _astro.yatyaza(info.myanmar.month, info.weekday) else ""}

def pyathada(info: DayInfo) -> Dict[str, Any]:
    return {"pyathada": _astro.PYATHADA_NAMES[_astro.pyathada(info.myanmar.month, info.weekday)]}

def nagahle(info: DayInfo) -> Dict[str, Any]:
    return {"nagahle": _astro.NAGAHLE_NAMES[_astro.nagahle(info.myanmar.month)]}

def mahabote(info: DayInfo) -> Dict[str, Any]:
    return {"mahabote": _astro.MAHABOTE_NAMES[_astro.mahabote(info.myanmar.year, info.weekday)]}

def nakhat(info: DayInfo) -> Dict[str, Any]:
    return {"nakhat": _astro.NAKHAT_NAMES[_astro.nakhat(info.myanmar.year)]}

def year_name(info: DayInfo) -> Dict[str, Any]:
    return {"year_name": _year_name(info.myanmar.year)}

def sasana_year(info: DayInfo) -> Dict[str, Any]:
    d = info.myanmar
    return {"sasana_year": _sasana_year(d.year, d.month, d.day)}

def astro(info: DayInfo) -> Dict[str, Any]:
    return {"astro": _astro.astro_days(info.jdn)}

def holidays(info: DayInfo) -> Dict[str, Any]:
    return {"holidays": public_holidays(info.jdn)}

def holidays_alt(info: DayInfo) -> Dict[str, Any]:
    return {"holidays_alt": other_holidays(info.jdn)}

def thingyan(info: DayInfo) -> Dict[str, Any]:
    # Late Tagu and Late Kason already lead into the next year's festival.
    d = info.myanmar
    return {"thingyan": festival_window(d.year + d.month // 13)}


register_attribute("sabbath", sabbath)
register_attribute("yatyaza", yatyaza)
register_attribute("pyathada", pyathada)
register_attribute("nagahle", nagahle)
register_attribute("mahabote", mahabote)
register_attribute("nakhat", nakhat)
register_attribute("year_name", year_name)
register_attribute("sasana_year", sasana_year)
register_attribute("astro", astro)
register_attribute("holidays", holidays)
register_attribute("holidays_alt", holidays_alt)
register_attribute("thingyan", thingyan)
