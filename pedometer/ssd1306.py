"""Driver for an SSD1306 OLED controller on an I2C bus, page by page."""

from __future__ import annotations

import time
from typing import Protocol

from .framebuffer import Color, Framebuffer

I2C_ADDRESS = 0x3C << 1
COMMAND_REGISTER = 0x00
DATA_REGISTER = 0x40

# Horizontal offset of column 0.
X_OFFSET = 0
X_OFFSET_LOWER = X_OFFSET & 0x0F
X_OFFSET_UPPER = (X_OFFSET >> 4) & 0x07

SUPPORTED_HEIGHTS = (32, 64, 128)

DISPLAY_ON = 0xAF
DISPLAY_OFF = 0xAE
SET_CONTRAST = 0x81
SET_PAGE_ADDRESS = 0xB0
SET_LOW_COLUMN = 0x00
SET_HIGH_COLUMN = 0x10

BOOT_DELAY_S = 0.1


class I2cBus(Protocol):
    def mem_write(self, device_address: int, mem_address: int, data: bytes) -> None:
        """Write bytes to a register of a device on the bus."""


class Ssd1306:
    """Sends a frame buffer to the display and configures the controller.

    Page data goes out one page at a time: ``update_screen`` starts the first
    page and each call to ``on_transfer_complete`` starts the next one.
    """

    def __init__(self, bus: I2cBus, framebuffer: Framebuffer | None = None) -> None:
        if framebuffer is None:
            framebuffer = Framebuffer()
        if framebuffer.height not in SUPPORTED_HEIGHTS:
            raise ValueError(
                f"only heights of {', '.join(map(str, SUPPORTED_HEIGHTS))} are supported: "
                f"{framebuffer.height}"
            )
        self.bus = bus
        self.framebuffer = framebuffer
        self.boot_delay = BOOT_DELAY_S
        self.initialized = False
        self.display_on = False
        self._page_index = 0

    def reset(self) -> None:
        """Rewind the page transfer; an I2C panel has no reset line to drive."""
        self._page_index = 0

    def write_command(self, byte: int) -> None:
        """Send one byte to the command register."""
        if not isinstance(byte, int) or not 0 <= byte <= 0xFF:
            raise ValueError(f"command must be a byte: {byte!r}")
        self.bus.mem_write(I2C_ADDRESS, COMMAND_REGISTER, bytes([byte]))

    def write_data(self, data: bytes | bytearray) -> None:
        """Send display data to the data register."""
        self.bus.mem_write(I2C_ADDRESS, DATA_REGISTER, bytes(data))

    def _update_page(self, index: int) -> None:
        self.write_command(SET_PAGE_ADDRESS + index)
        self.write_command(SET_LOW_COLUMN + X_OFFSET_LOWER)
        self.write_command(SET_HIGH_COLUMN + X_OFFSET_UPPER)
        self.write_data(self.framebuffer.page(index))

    def init(self) -> None:
        """Configure the controller, clear the screen and switch it on."""
        self.reset()
        if self.boot_delay > 0:
            time.sleep(self.boot_delay)

        height = self.framebuffer.height
        self.set_display_on(False)
        self.write_command(0x20)  # memory addressing mode
        self.write_command(0x00)  # horizontal addressing
        self.write_command(0xB0)  # page start address
        self.write_command(0xC0)  # mirrored vertically
        self.write_command(0x00)  # low column address
        self.write_command(0x10)  # high column address
        self.write_command(0x40)  # start line address
        self.set_contrast(0xFF)
        self.write_command(0xA0)  # mirrored horizontally
        self.write_command(0xA6)  # normal colour
        self.write_command(0xFF if height == 128 else 0xA8)  # multiplex ratio
        self.write_command(0x1F if height == 32 else 0x3F)
        self.write_command(0xA4)  # output follows RAM
        self.write_command(0xD3)  # display offset
        self.write_command(0x00)
        self.write_command(0xD5)  # clock divide ratio
        self.write_command(0xF0)
        self.write_command(0xD9)  # pre-charge period
        self.write_command(0x22)
        self.write_command(0xDA)  # COM pins configuration
        self.write_command(0x02 if height == 32 else 0x12)
        self.write_command(0xDB)  # VCOMH
        self.write_command(0x20)
        self.write_command(0x8D)  # charge pump
        self.write_command(0x14)
        self.set_display_on(True)

        self.framebuffer.fill(Color.BLACK)
        self.update_screen()
        self.framebuffer.set_cursor(0, 0)
        self.initialized = True

    def update_screen(self) -> None:
        """Start sending the frame buffer, beginning with the first page."""
        self._page_index = 0
        self._update_page(self._page_index)

    def on_transfer_complete(self) -> bool:
        """Send the next page after one finishes; False once all pages are sent."""
        self._page_index += 1
        if self._page_index < self.framebuffer.pages:
            self._update_page(self._page_index)
            return True
        return False

    def set_contrast(self, value: int) -> None:
        """Set the contrast; higher values are brighter."""
        self.write_command(SET_CONTRAST)
        self.write_command(value)

    def set_display_on(self, on: bool | int) -> None:
        """Switch the panel on or off."""
        if on:
            self.display_on = True
            self.write_command(DISPLAY_ON)
        else:
            self.display_on = False
            self.write_command(DISPLAY_OFF)