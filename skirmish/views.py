"""View snapshots for rendering (decoupled from controller state).

Everything a renderer needs to draw the attack popup, the result popup and
the sacrifice button, already translated.
"""
from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

from .constants import AttackMode, UILayout
from .i18n import Translator

if TYPE_CHECKING:
    from .interaction import AttackState
    from .result import AttackSummary
    from .sacrifice import SacrificeOption


@dataclass
class AttackPopupView:
    title: str
    timer_text: str
    time_remaining: int
    timer_warning: bool
    mode: AttackMode
    health_label: str
    damage_text: str
    unit_label: str
    select_target_label: str
    target_labels: List[str] = field(default_factory=list)
    selected_index: Optional[int] = None
    no_targets_text: Optional[str] = None  # Shown in UNIT mode with an empty set
    confirm_enabled: bool = False
    confirm_label: str = ""
    cancel_label: str = ""


@dataclass
class ResultView:
    title: str
    card_text: str
    target_text: str
    blocked: bool
    message: Optional[str] = None


@dataclass
class SacrificeButtonView:
    label: str
    tooltip: str
    enabled: bool


def build_attack_view(state: 'AttackState', time_remaining: int, t: Translator) -> AttackPopupView:
    no_targets = None
    if state.mode == AttackMode.UNIT and not state.targets:
        no_targets = t("attack.noValidTargets")

    return AttackPopupView(
        title=t("attack.chooseAttack"),
        timer_text=f"{t('game.timeRemaining')}: {time_remaining}s",
        time_remaining=time_remaining,
        timer_warning=time_remaining <= UILayout.TIMER_WARNING_SECONDS,
        mode=state.mode,
        health_label=t("attack.attackHealth"),
        damage_text=f"{t('game.damagePoints')}: {state.damage}",
        unit_label=t("attack.attackUnit"),
        select_target_label=t("attack.selectTarget"),
        target_labels=[target.label for target in state.targets],
        selected_index=state.target_index(),
        no_targets_text=no_targets,
        confirm_enabled=state.can_confirm,
        confirm_label=t("game.ui.confirm"),
        cancel_label=t("game.ui.cancel"),
    )


def build_result_view(summary: 'AttackSummary', t: Translator) -> ResultView:
    target_text = summary.target_text
    if summary.is_health_attack:
        target_text = f"♥ {t('game.health')}"
    return ResultView(
        title=t(summary.title_key),
        card_text=summary.card_text,
        target_text=target_text,
        blocked=summary.blocked,
        message=t(summary.message_key) if summary.message_key else None,
    )


def build_sacrifice_view(option: 'SacrificeOption', t: Translator) -> Optional[SacrificeButtonView]:
    """None when the button is not offered for the selected card."""
    if not option.offered:
        return None
    return SacrificeButtonView(
        label=t("game.sacrifice.button"),
        tooltip=t("game.sacrifice.title"),
        enabled=option.enabled,
    )
