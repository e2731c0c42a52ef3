"""Game constants and enums."""
from enum import Enum, auto


# Display settings
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
FPS = 60

# Base resolution for scaling (original design resolution)
BASE_WIDTH = 1280
BASE_HEIGHT = 720

UI_SCALE = WINDOW_WIDTH / BASE_WIDTH

def scaled(value: int) -> int:
    """Scale a value by UI_SCALE."""
    return int(value * UI_SCALE)


# Timing (seconds)
DEFAULT_TURN_TIME = 30
TICK_INTERVAL = 1.0
RESULT_DISPLAY_TIME = 3.0

# Colors
COLOR_BG = (30, 30, 40)
COLOR_OVERLAY = (0, 0, 0, 160)
COLOR_POPUP_BG = (40, 40, 55, 240)
COLOR_POPUP_BORDER = (120, 120, 150)
COLOR_SELECTED = (255, 215, 0)  # Gold
COLOR_OPTION = (60, 60, 75)
COLOR_OPTION_SELECTED = (90, 80, 40)
COLOR_CONFIRM = (50, 120, 60)
COLOR_CANCEL = (120, 50, 50)
COLOR_DISABLED = (70, 70, 70)
COLOR_TEXT = (240, 240, 240)
COLOR_TEXT_DIM = (150, 150, 150)
COLOR_TIMER_LOW = (230, 80, 80)
COLOR_BLOCKED = (200, 90, 90)
COLOR_SUCCESS = (100, 200, 100)


class Rank(Enum):
    """Card face value."""
    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    JOKER = "JOKER"


class Suit(Enum):
    """Card suit. Jokers carry NONE."""
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"
    NONE = "none"


SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
    Suit.NONE: "",
}


class AttackMode(Enum):
    """What the attacking card strikes."""
    UNIT = "unit"       # An opposing card on the board
    HEALTH = "health"   # The opponent's health pool


class GamePhase(Enum):
    """Turn phases as reported by the game store."""
    SETUP = auto()
    DRAW = auto()
    PLAY = auto()
    ATTACK = auto()
    END = auto()
    GAME_OVER = auto()


# Damage dealt per rank. Face cards cap at 10, the joker deals nothing.
DAMAGE_TABLE = {
    Rank.ACE: 1,
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
    Rank.JOKER: 0,
}
FALLBACK_DAMAGE = 1

# Ranks steered toward direct health attacks by default
LOW_VALUE_RANKS = frozenset([
    Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR,
    Rank.FIVE, Rank.SIX, Rank.SEVEN,
])

# Ranks that may be sacrificed
SACRIFICE_RANKS = frozenset([Rank.JACK, Rank.QUEEN, Rank.KING])


# =============================================================================
# UI LAYOUT CONFIGURATION
# All values are in BASE resolution (1280x720) and get auto-scaled
# =============================================================================

class UILayout:
    """Popup layout configuration. All values in base resolution."""

    ATTACK_POPUP_WIDTH = 520
    ATTACK_POPUP_HEIGHT = 420
    ATTACK_POPUP_Y = 120

    OPTION_WIDTH = 230
    OPTION_HEIGHT = 90
    OPTION_GAP = 20

    TARGET_WIDTH = 70
    TARGET_HEIGHT = 40
    TARGET_GAP = 8

    BUTTON_WIDTH = 140
    BUTTON_HEIGHT = 40

    RESULT_POPUP_WIDTH = 420
    RESULT_POPUP_HEIGHT = 200
    RESULT_POPUP_Y = 200

    SACRIFICE_BUTTON_X = 1080
    SACRIFICE_BUTTON_Y = 640
    SACRIFICE_BUTTON_WIDTH = 160
    SACRIFICE_BUTTON_HEIGHT = 44

    TIMER_WARNING_SECONDS = 5
