"""Lesson 13: show messages on an LCD1602."""

from superkit.lib.lcd1602 import LCD1602
from superkit.lib.logger import Logger
from superkit.lib.runner import Runner

# Seconds each message stays up.
DELAY = 2.0
ROUNDS = 3
MESSAGES = (
    " LCD 1602 Test \n123456789ABCDEF",
    "   SUNFOUNDER \nHello World ! :)",
    "Welcome to --->\n  sunfounder.com",
    "May the Python .\n... be with you!",
    "Tux says \"Hi\"\n    python.org",
)


def setup() -> LCD1602:
    lcd = LCD1602()
    try:
        lcd.init()
    except Exception:
        lcd.close()
        raise
    return lcd


def display_loop(lcd: LCD1602, runner: Runner) -> bool:
    """Show every message ROUNDS times. Returns False if interrupted."""

    for _ in range(ROUNDS):
        for message in MESSAGES:
            for line in lcd.message(message):
                Logger.info(line)
            if not runner.sleep(DELAY):
                return False

    return True


def execute() -> None:
    # The message rounds are the whole lesson, so cycles is pinned to one.
    with setup() as lcd, Runner("13_LCD1602", cycles=1) as runner:
        for _ in runner.loop():
            display_loop(lcd, runner)
