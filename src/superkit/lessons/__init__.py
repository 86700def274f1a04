"""
# SuperKit Lessons

One module per kit lesson. Every module exposes `setup()`, which claims the
lesson's hardware, and `execute()`, which runs the lesson until Ctrl-C or
until the configured number of cycles has completed.

`LESSONS` maps each module name to its kit lesson number and title, in kit
order. The seven segment and dice lessons share number 11 on the kit.
"""

LESSONS: dict[str, tuple[str, str]] = {
    "led": ("01", "Blinking LED"),
    "btn_and_led": ("02", "Controlling an LED by a button"),
    "eight_led": ("03", "Flowing LED lights"),
    "pwm_led": ("04", "Breathing LED"),
    "rgb": ("05", "RGB LED"),
    "motor": ("07", "DC motor"),
    "rotary_encoder": ("08", "Rotary encoder"),
    "timer555": ("09", "555 timer"),
    "hc595_led": ("10", "Driving LEDs by 74HC595"),
    "segment": ("11", "Driving a 7-segment display by 74HC595"),
    "dice": ("11", "Dice"),
    "dot_matrix": ("12", "Driving a dot matrix by 2 74HC595s"),
    "lcd1602": ("13", "LCD1602"),
}
