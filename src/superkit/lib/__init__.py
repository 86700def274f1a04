"""
# SuperKit Core Library

This package contains the pieces every lesson is built from: the Ctrl-C
aware run loop, GPIO pin claiming, configuration, logging, and drivers for
the kit's 74HC595 shift register and LCD1602 display.
"""
