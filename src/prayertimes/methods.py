"""Registry of the built-in calculation methods."""

from types import MappingProxyType

from prayertimes.errors import UnknownMethodError
from prayertimes.models import FixedAngle, FixedOffsetMinutes, Method

_BUILTIN: tuple[Method, ...] = (
    Method(
        name="MWL",
        fajr_angle=18,
        isha=FixedAngle(17),
        description="Muslim World League",
    ),
    Method(
        name="ISNA",
        fajr_angle=15,
        isha=FixedAngle(15),
        description="Islamic Society of North America",
    ),
    Method(
        name="EGYPT",
        fajr_angle=19.5,
        isha=FixedAngle(17.5),
        description="Egyptian General Authority of Survey",
    ),
    Method(
        name="MAKKAH",
        fajr_angle=18.5,
        isha=FixedOffsetMinutes(90),
        description="Umm Al-Qura University, Makkah",
    ),
    Method(
        name="KARACHI",
        fajr_angle=18,
        isha=FixedAngle(18),
        description="University of Islamic Sciences, Karachi",
    ),
    Method(
        name="TEHRAN",
        fajr_angle=17.7,
        isha=FixedAngle(14),
        maghrib_angle=4.5,
        description="Institute of Geophysics, University of Tehran",
    ),
    Method(
        name="JAFARI",
        fajr_angle=16,
        isha=FixedAngle(14),
        maghrib_angle=4,
        description="Shia Ithna-Ashari, Leva Institute, Qum",
    ),
)

METHODS: MappingProxyType[str, Method] = MappingProxyType({m.name: m for m in _BUILTIN})

DEFAULT_METHOD = "MWL"


def available_methods() -> tuple[str, ...]:
    """Names of the built-in methods in registry order."""
    return tuple(METHODS)


def get_method(name: str) -> Method:
    """Look up a built-in method by name, ignoring case.

    Raises:
        UnknownMethodError: If no built-in method has that name.
    """
    try:
        return METHODS[name.strip().upper()]
    except KeyError:
        raise UnknownMethodError(
            f"Unknown calculation method: {name!r} "
            f"(expected one of {', '.join(METHODS)})"
        ) from None
