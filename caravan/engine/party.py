"""Party ledger: health and status mutators over a list of members.

All mutators work in place and ignore dead members. Health is clamped to
[0, MAX_HEALTH] and a member dies exactly when health reaches 0.
"""

import logging
from copy import deepcopy

from ..models.game import PaceType, RationsType
from ..models.party import PartyMember, PartyStatus
from ..utils.constants import (
    INJURY_DAMAGE,
    MAX_HEALTH,
    PACE_HEALTH_EFFECTS,
    RATION_HEALTH_EFFECTS,
    SICKNESS_DAMAGE,
    SICKNESS_MAX_DAYS,
    SICKNESS_MIN_DAYS,
    SICKNESS_SPREAD_CHANCE,
    STARTING_HEALTH,
)
from ..utils.rng import RandomSource, pick, roll_int

logger = logging.getLogger(__name__)


def create_party(names: list[str], first_id: int = 0) -> list[PartyMember]:
    """Create a healthy party from a list of names.

    Args:
        names: Member names, in party order
        first_id: ID for the first member; the rest follow sequentially

    Returns:
        New party members. The caller advances its counter by len(names).
    """
    return [
        PartyMember(id=first_id + offset, name=name, health=STARTING_HEALTH)
        for offset, name in enumerate(names)
    ]


def clone_party(party: list[PartyMember]) -> list[PartyMember]:
    """Return an independent copy of the party."""
    return deepcopy(party)


def get_member(party: list[PartyMember], member_id: int) -> PartyMember | None:
    for member in party:
        if member.id == member_id:
            return member
    return None


def get_alive_members(party: list[PartyMember]) -> list[PartyMember]:
    return [m for m in party if m.status != PartyStatus.DEAD]


def get_alive_count(party: list[PartyMember]) -> int:
    return len(get_alive_members(party))


def is_party_alive(party: list[PartyMember]) -> bool:
    return get_alive_count(party) > 0


def _clamp_health(health: int) -> int:
    return max(0, min(MAX_HEALTH, health))


def update_health(party: list[PartyMember], member_id: int, delta: int) -> None:
    """Change a member's health by delta.

    Clamps into [0, MAX_HEALTH]. The member becomes dead the first time the
    clamped value is 0; dead members are never changed again.
    """
    member = get_member(party, member_id)
    if member is None or member.status == PartyStatus.DEAD:
        return

    member.health = _clamp_health(member.health + delta)
    if member.health == 0:
        member.status = PartyStatus.DEAD
        member.sickness_turns = 0
        logger.info(f"{member.name} has died")


def mark_dead(party: list[PartyMember], member_id: int) -> bool:
    """Kill a member outright (drowning). Returns False if already dead or unknown."""
    member = get_member(party, member_id)
    if member is None or member.status == PartyStatus.DEAD:
        return False
    member.health = 0
    member.status = PartyStatus.DEAD
    member.sickness_turns = 0
    return True


def set_status(
    party: list[PartyMember],
    member_id: int,
    status: PartyStatus,
    rng: RandomSource,
) -> None:
    """Assign a status to a living member.

    Moving into sick draws a recovery countdown uniformly from
    [SICKNESS_MIN_DAYS, SICKNESS_MAX_DAYS] unless one is already carried.
    Moving to healthy clears the countdown.
    """
    member = get_member(party, member_id)
    if member is None or member.status == PartyStatus.DEAD:
        return

    member.status = status

    if status == PartyStatus.SICK and member.sickness_turns == 0:
        member.sickness_turns = roll_int(rng, SICKNESS_MIN_DAYS, SICKNESS_MAX_DAYS + 1)

    if status == PartyStatus.HEALTHY:
        member.sickness_turns = 0


def afflict(
    party: list[PartyMember],
    member_id: int,
    status: PartyStatus,
    rng: RandomSource,
) -> bool:
    """Make a member sick or injured if they are eligible.

    Only healthy members can fall sick; healthy or sick members can be
    injured.

    Returns:
        True if the status changed
    """
    member = get_member(party, member_id)
    if member is None:
        return False
    if status == PartyStatus.SICK:
        eligible = member.status == PartyStatus.HEALTHY
    elif status == PartyStatus.INJURED:
        eligible = member.status in (PartyStatus.HEALTHY, PartyStatus.SICK)
    else:
        raise ValueError(f"Cannot afflict a member with status {status.value}")
    if not eligible:
        return False
    set_status(party, member_id, status, rng)
    return True


def heal_member(party: list[PartyMember], member_id: int) -> bool:
    """Cure a sick member with medicine.

    Medicine cures sickness only: healthy, injured and dead members are left
    unchanged and False is returned.
    """
    member = get_member(party, member_id)
    if member is None or member.status != PartyStatus.SICK:
        return False

    member.status = PartyStatus.HEALTHY
    member.sickness_turns = 0
    return True


def make_random_member_sick(party: list[PartyMember], rng: RandomSource) -> PartyMember | None:
    victim = pick(rng, [m for m in party if m.status == PartyStatus.HEALTHY])
    if victim is not None:
        set_status(party, victim.id, PartyStatus.SICK, rng)
    return victim


def make_random_member_injured(
    party: list[PartyMember], rng: RandomSource
) -> PartyMember | None:
    candidates = [m for m in party if m.status in (PartyStatus.HEALTHY, PartyStatus.SICK)]
    victim = pick(rng, candidates)
    if victim is not None:
        set_status(party, victim.id, PartyStatus.INJURED, rng)
    return victim


def apply_weekly_effects(party: list[PartyMember], rations: RationsType, pace: PaceType) -> None:
    """Apply the weekly pace and ration health effects to every living member."""
    weekly = PACE_HEALTH_EFFECTS[pace] + RATION_HEALTH_EFFECTS[rations]
    for member in get_alive_members(party):
        update_health(party, member.id, weekly)


def apply_daily_effects(
    party: list[PartyMember],
    rations: RationsType,
    pace: PaceType,
    day_of_week: int,
    rng: RandomSource,
) -> list[str]:
    """Apply one day of pace, ration, sickness and injury effects.

    Members are processed in party order:
    1. On day_of_week 7, the weekly pace and ration health effects
    2. Sick members lose SICKNESS_DAMAGE, count down and may recover; each
       sick member then has an independent SICKNESS_SPREAD_CHANCE to infect
       one random healthy member
    3. Injured members lose INJURY_DAMAGE

    Args:
        party: Party to mutate
        rations: Current rations
        pace: Current pace
        day_of_week: 1-7, weekly effects apply on 7
        rng: Random source for contagion

    Returns:
        Messages describing recoveries, infections and deaths
    """
    messages = []

    for member in party:
        if member.status == PartyStatus.DEAD:
            continue

        if day_of_week == 7:
            weekly = PACE_HEALTH_EFFECTS[pace] + RATION_HEALTH_EFFECTS[rations]
            update_health(party, member.id, weekly)

        if member.status == PartyStatus.SICK:
            update_health(party, member.id, -SICKNESS_DAMAGE)
            member.sickness_turns = max(0, member.sickness_turns - 1)

            if member.sickness_turns == 0 and member.status == PartyStatus.SICK:
                member.status = PartyStatus.HEALTHY
                messages.append(f"{member.name} has recovered from illness.")

            if rng.random() < SICKNESS_SPREAD_CHANCE:
                healthy = [
                    m for m in party if m.id != member.id and m.status == PartyStatus.HEALTHY
                ]
                new_sick = pick(rng, healthy)
                if new_sick is not None:
                    set_status(party, new_sick.id, PartyStatus.SICK, rng)
                    messages.append(f"{new_sick.name} has caught the illness.")

        if member.status == PartyStatus.INJURED:
            update_health(party, member.id, -INJURY_DAMAGE)

        if member.status == PartyStatus.DEAD:
            messages.append(f"{member.name} has died.")

    return messages


def get_party_health_percent(party: list[PartyMember]) -> int:
    """Return the average health of living members as a percentage."""
    alive = get_alive_members(party)
    if not alive:
        return 0
    total = sum(m.health for m in alive)
    return round(total / (len(alive) * MAX_HEALTH) * 100)
