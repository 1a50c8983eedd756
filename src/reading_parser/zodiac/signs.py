"""Tropical and sidereal sign calendars plus per-sign descriptive text."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence

from reading_parser.models import SignReading
from reading_parser.zodiac.dates import normalize_date


@dataclass(frozen=True)
class SignTransition:
    """First calendar day of a sign."""

    month: int
    day: int
    sign: str


ZODIAC_TRANSITIONS: tuple[SignTransition, ...] = (
    SignTransition(1, 20, "AQUARIUS"),
    SignTransition(2, 18, "PISCES"),
    SignTransition(3, 20, "ARIES"),
    SignTransition(4, 20, "TAURUS"),
    SignTransition(5, 20, "GEMINI"),
    SignTransition(6, 20, "CANCER"),
    SignTransition(7, 22, "LEO"),
    SignTransition(8, 22, "VIRGO"),
    SignTransition(9, 22, "LIBRA"),
    SignTransition(10, 22, "SCORPIO"),
    SignTransition(11, 22, "SAGITTARIUS"),
    SignTransition(12, 20, "CAPRICORN"),
)

# Sidereal (Vedic) solar ingress dates.
VEDIC_TRANSITIONS: tuple[SignTransition, ...] = (
    SignTransition(1, 14, "MAKARA"),
    SignTransition(2, 13, "KUMBHA"),
    SignTransition(3, 14, "MEENA"),
    SignTransition(4, 14, "MESHA"),
    SignTransition(5, 15, "VRISHABHA"),
    SignTransition(6, 15, "MITHUNA"),
    SignTransition(7, 16, "KARKA"),
    SignTransition(8, 17, "SIMHA"),
    SignTransition(9, 17, "KANYA"),
    SignTransition(10, 17, "TULA"),
    SignTransition(11, 16, "VRISHCHIKA"),
    SignTransition(12, 16, "DHANU"),
)

SIGN_KEYWORDS: Mapping[str, str] = MappingProxyType(
    {
        "ARIES": "Restless, Guarded, Impulsive, Perfectionist",
        "TAURUS": "Stubborn, Grounded, Loyal, Creative",
        "GEMINI": "Dual, Intellectual, Adaptive, Searching",
        "CANCER": "Intuitive, Nostalgic, Empathetic, Protective",
        "LEO": "Proud, Protective, Playful, Intense",
        "VIRGO": "Analytical, Organized, Sensitive, Critical",
        "LIBRA": "Balanced, Indecisive, Diplomatic, Refined",
        "SCORPIO": "Magnetic, Transformative, Private, Observant",
        "SAGITTARIUS": "Philosophical, Honest, Resilient, Independent",
        "CAPRICORN": "Strategic, Self-reliant, Ambitious, Humorous",
        "AQUARIUS": "Visionary, Independent, Altruistic, Rebellious",
        "PISCES": "Dreamer, Fluid, Chameleonic, Soulful",
    }
)

SIGN_READINGS: Mapping[str, SignReading] = MappingProxyType(
    {
        "ARIES": SignReading(
            per="Acts first and weighs it later; hates standing still.",
            pst="An early setback taught you to guard your plans closely.",
            pre="Impatient with a situation that refuses to move at your pace.",
            ftr="A fresh start opens once you stop redoing finished work.",
        ),
        "TAURUS": SignReading(
            per="Steady, loyal and slow to change a settled opinion.",
            pst="Built security the hard way, one careful step at a time.",
            pre="Holding on to something comfortable that no longer fits.",
            ftr="A creative project turns into lasting material reward.",
        ),
        "GEMINI": SignReading(
            per="Curious, quick and able to argue either side.",
            pst="Two paths split early and you still wonder about the other.",
            pre="Juggling too many conversations to finish any of them.",
            ftr="A single clear choice brings the calm you keep searching for.",
        ),
        "CANCER": SignReading(
            per="Protective of family and guided by strong intuition.",
            pst="An old home or early bond still shapes your choices.",
            pre="Caring for others while your own needs wait in line.",
            ftr="A safe base lets you take the risk you have postponed.",
        ),
        "LEO": SignReading(
            per="Warm, proud and happiest at the centre of things.",
            pst="Recognition came late and you remember who doubted you.",
            pre="Defending someone close even when it costs you.",
            ftr="A public moment rewards years of quiet effort.",
        ),
        "VIRGO": SignReading(
            per="Precise, observant and hardest on yourself.",
            pst="Learned early that details decide outcomes.",
            pre="Fixing a problem others have not noticed yet.",
            ftr="Letting go of perfection frees a long-held plan.",
        ),
        "LIBRA": SignReading(
            per="Diplomatic, fair and drawn to beauty and balance.",
            pst="Kept the peace in a home that needed a mediator.",
            pre="Weighing two options that both have merit.",
            ftr="A partnership settles the decision you keep delaying.",
        ),
        "SCORPIO": SignReading(
            per="Private, intense and impossible to fool twice.",
            pst="A betrayal changed how much of yourself you share.",
            pre="Watching quietly before you commit to a move.",
            ftr="A deep change turns an ending into real power.",
        ),
        "SAGITTARIUS": SignReading(
            per="Honest, restless and always looking past the horizon.",
            pst="Travel or study once broke a pattern that held you back.",
            pre="Outgrowing a routine that felt freeing at first.",
            ftr="An opportunity far from home widens your world.",
        ),
        "CAPRICORN": SignReading(
            per="Ambitious, self-reliant and dryly funny.",
            pst="Responsibility arrived early and made you grow up fast.",
            pre="Climbing steadily while others wonder how you cope.",
            ftr="Long-term planning pays off with earned authority.",
        ),
        "AQUARIUS": SignReading(
            per="Independent, inventive and a little ahead of the crowd.",
            pst="Felt like an outsider before finding your own people.",
            pre="Pushing an idea that others are not ready for.",
            ftr="A group effort makes your unusual vision real.",
        ),
        "PISCES": SignReading(
            per="Sensitive, imaginative and easily moved by others.",
            pst="Absorbed other people's moods long before you named them.",
            pre="Drifting between a dream and a practical demand.",
            ftr="Creative or healing work gives your sensitivity a home.",
        ),
    }
)


def _walk_transitions(month: int, day: int, transitions: Sequence[SignTransition]) -> str:
    """Return the sign in force on ``(month, day)``.

    Transitions are walked from latest to earliest; a date before the first
    transition of the year belongs to the previous year's final sign.
    """

    month, day = normalize_date(month, day)
    for transition in reversed(transitions):
        if transition.month == month and day >= transition.day:
            return transition.sign
        if transition.month < month:
            return transition.sign
    return transitions[-1].sign


def zodiac_sign(month: int, day: int) -> str:
    """Resolve the tropical sign, e.g. ``(1, 19) -> CAPRICORN``."""

    return _walk_transitions(month, day, ZODIAC_TRANSITIONS)


def vedic_sign(month: int, day: int) -> str:
    """Resolve the sidereal sign, e.g. ``(1, 16) -> MAKARA``."""

    return _walk_transitions(month, day, VEDIC_TRANSITIONS)
