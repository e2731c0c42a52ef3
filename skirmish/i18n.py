"""Text lookup for popup strings.

Keys that have no translation are shown as-is.
"""
from typing import Dict, Optional


TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "ru": {
        "attack.chooseAttack": "Выберите атаку",
        "attack.attackHealth": "Атаковать здоровье",
        "attack.attackUnit": "Атаковать карту",
        "attack.selectTarget": "Выберите цель",
        "attack.noValidTargets": "Нет доступных целей",
        "attack.blocked": "Атака заблокирована!",
        "attack.blockedMessage": "Противник отразил удар",
        "attack.success": "Атака успешна!",
        "game.timeRemaining": "Осталось времени",
        "game.damagePoints": "Урон",
        "game.health": "Здоровье",
        "game.ui.cancel": "Отмена",
        "game.ui.confirm": "Подтвердить",
        "game.sacrifice.title": "Пожертвовать карту",
        "game.sacrifice.button": "Жертва",
    },
    "en": {
        "attack.chooseAttack": "Choose your attack",
        "attack.attackHealth": "Attack health",
        "attack.attackUnit": "Attack a card",
        "attack.selectTarget": "Select a target",
        "attack.noValidTargets": "No valid targets",
        "attack.blocked": "Attack blocked!",
        "attack.blockedMessage": "Your opponent blocked the strike",
        "attack.success": "Attack succeeded!",
        "game.timeRemaining": "Time remaining",
        "game.damagePoints": "Damage",
        "game.health": "Health",
        "game.ui.cancel": "Cancel",
        "game.ui.confirm": "Confirm",
        "game.sacrifice.title": "Sacrifice this card",
        "game.sacrifice.button": "Sacrifice",
    },
}

DEFAULT_LANGUAGE = "ru"


class Translator:
    """Maps fixed keys to strings of one language."""

    def __init__(self, language: str = DEFAULT_LANGUAGE,
                 table: Optional[Dict[str, Dict[str, str]]] = None):
        self.table = table if table is not None else TRANSLATIONS
        self.language = language

    @property
    def language(self) -> str:
        return self._language

    @language.setter
    def language(self, value: str):
        self._language = value if value in self.table else DEFAULT_LANGUAGE

    def t(self, key: str) -> str:
        return self.table.get(self._language, {}).get(key, key)

    __call__ = t
