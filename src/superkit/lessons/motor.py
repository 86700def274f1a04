"""Lesson 07: run a DC motor through an L293D, clockwise then counter-clockwise."""

from gpiozero import Motor

from superkit.lib.board import claim
from superkit.lib.logger import Logger
from superkit.lib.runner import Runner

MOTOR_PIN1 = 17
MOTOR_PIN2 = 18
MOTOR_ENABLE = 27
DELAY = 5.0


def setup() -> Motor:
    return claim(Motor, (MOTOR_PIN1, MOTOR_PIN2), "motor", enable=MOTOR_ENABLE, pwm=False)


def execute() -> None:
    with setup() as motor, Runner("07_Motor") as runner:
        try:
            for _ in runner.loop():
                Logger.info("motor clockwise ...")
                motor.forward()
                if not runner.sleep(DELAY):
                    break

                Logger.info("stopped")
                motor.stop()
                if not runner.sleep(DELAY):
                    break

                Logger.info("motor counter-clockwise ...")
                motor.backward()
                if not runner.sleep(DELAY):
                    break

                Logger.info("stopped")
                motor.stop()
                if not runner.sleep(DELAY):
                    break
        finally:
            motor.stop()
            motor.enable_device.off()
