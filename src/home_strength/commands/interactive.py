"""Interactive questionnaire for routine generation."""

import questionary
from questionary import Style

from ..models.exercises import EnergyLevel, Equipment, MuscleFocus
from ..models.routine import (
    AdultRequest,
    DurationBucket,
    Intensity,
    KidDuration,
    KidRequest,
)
from ..models.user_profile import ProfileType

custom_style = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
    ]
)


class CancelledError(Exception):
    """The user aborted the questionnaire (Ctrl-C)."""


def _required(answer):
    if answer is None:
        raise CancelledError()
    return answer


async def ask_profile() -> ProfileType:
    """Ask who the routine is for."""
    return _required(
        await questionary.select(
            "Who is working out?",
            choices=[
                questionary.Choice(p.display_name, p) for p in ProfileType
            ],
            style=custom_style,
        ).ask_async()
    )


async def ask_adult_request(profile: ProfileType) -> AdultRequest:
    """Collect equipment, duration, intensity and focus."""
    equipment = _required(
        await questionary.checkbox(
            "What equipment do you have? (none selected = any)",
            choices=[questionary.Choice(eq.display_name, eq) for eq in Equipment],
            style=custom_style,
        ).ask_async()
    )

    duration = _required(
        await questionary.select(
            "How long?",
            choices=[
                questionary.Choice("Short (15-20 min)", DurationBucket.SHORT),
                questionary.Choice("Medium (25-35 min)", DurationBucket.MEDIUM),
                questionary.Choice("Long (40-50 min)", DurationBucket.LONG),
            ],
            default=DurationBucket.MEDIUM,
            style=custom_style,
        ).ask_async()
    )

    intensity = _required(
        await questionary.select(
            "How hard?",
            choices=[questionary.Choice(i.value.title(), i) for i in Intensity],
            default=Intensity.MEDIUM,
            style=custom_style,
        ).ask_async()
    )

    focus = _required(
        await questionary.select(
            "Any muscle focus?",
            choices=[questionary.Choice(f.display_name, f) for f in MuscleFocus],
            default=MuscleFocus.FULL_BODY,
            style=custom_style,
        ).ask_async()
    )

    return AdultRequest(
        equipment=frozenset(equipment),
        duration=duration,
        intensity=intensity,
        focus=focus,
        profile=profile,
    )


async def ask_kid_request(profile: ProfileType) -> KidRequest:
    """Collect duration and energy level for a kid routine."""
    duration = _required(
        await questionary.select(
            "How long should we play?",
            choices=[
                questionary.Choice("Short (5-8 min)", KidDuration.SHORT),
                questionary.Choice("Medium (10-12 min)", KidDuration.MEDIUM),
                questionary.Choice("Long (15 min)", KidDuration.LONG),
            ],
            style=custom_style,
        ).ask_async()
    )

    energy = _required(
        await questionary.select(
            "How much energy do you have?",
            choices=[
                questionary.Choice("Chill", EnergyLevel.LOW),
                questionary.Choice("Medium", EnergyLevel.MEDIUM),
                questionary.Choice("Super!", EnergyLevel.HIGH),
            ],
            style=custom_style,
        ).ask_async()
    )

    return KidRequest(duration=duration, energy=energy, profile=profile)


async def ask_request(profile: ProfileType | None = None) -> AdultRequest | KidRequest:
    """Run the full questionnaire, branching on the profile."""
    profile = profile or await ask_profile()
    if profile.is_young_kid:
        return await ask_kid_request(profile)
    return await ask_adult_request(profile)
