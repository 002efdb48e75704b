# pedometer

This package holds the logic of a small wrist-worn step counter as plain Python
objects. It needs no hardware. Pin levels, SPI and I²C transfers and the
millisecond tick clock come in as objects or callables that you supply, so every
part runs and can be tested on a desktop.

## Modules

- `pedometer.gpio`: `PinState`, `Port` and `GpioBank`.
  - `GpioBank` models the board's ports with `read`, `write` and `toggle`.
  - Its pins start as the board configures them: outputs and pull-down inputs
    read low, and the two pull-up inputs read high.
  - The module also defines the board's pin assignments as `(port, pin)` pairs,
    such as `SW1`, `JOYSTICK_CLICK` and `RGB_RED`.
- `pedometer.filter`: fixed-point smoothing of sensor readings.
  - `iir_filter(previous, sample)` applies `y += (x - y) >> 3` to each axis.
    The results are 16-bit signed values.
  - `MagnitudeWindow` keeps the last 64 acceleration magnitudes. Each `update`
    refreshes `sum`, `mean` and `scaled_variance`.
  - `MagnitudeWindow` also exposes `current` and `readings`.
- `pedometer.peak_detection`: `PeakDetector(window, on_step)`.
  - It waits 192 samples for the statistics to settle before counting anything.
  - It counts a step when the previous magnitude was above mean + 2700, the
    current magnitude is at or below the mean, and the scaled variance is above
    50000.
  - After each step it waits 30 samples before it can count another.
  - `execute()` returns True when it counted a step and calls `on_step(1)`.
- `pedometer.adc`: `AdcReadings`.
  - It stores one scan in the order potentiometer, joystick Y, joystick X.
  - `joystick()` returns `(x, y)` and `potentiometer()` returns the
    potentiometer reading.
- `pedometer.joystick`: joystick position from raw readings.
  - `calc_position(x_raw, y_raw)` returns a frozen `JoystickPosition` with a
    percentage and a `Direction` for each axis.
  - A displacement under 2 % counts as `Direction.REST`. Percentages are
    capped at 100.
  - The pieces are also available separately: `raw_adc_to_percentage`,
    `clamp_percentage` and `JoystickPosition.y_scaled()`.
- `pedometer.rotary_pot`: `read_goal(potentiometer_adc)` maps a reading to a
  step goal from 500 to 15000 in steps of 36.
- `pedometer.pwm`: `PwmChannel(reload, compare)`.
  - `set_duty_cycle(percent)` sets the compare value.
  - `duty_cycle()` reads the percentage back.
- `pedometer.buttons`: `Buttons(gpio, clock)` works on a `GpioBank` and a
  millisecond clock.
  - `update()` does the debounced polling: a new level must be seen on 3
    consecutive polls.
  - `check_button(name)` reports `ButtonState.PUSHED` or
    `ButtonState.RELEASED` once per change, and `ButtonState.NO_CHANGE`
    otherwise.
  - `check_hold()` classifies a joystick click as
    `JoystickEvent.SHORT_PRESS`, or as `JoystickEvent.LONG_PRESS` when it is
    held for 1000 ms or more.
  - `check_double_push()` detects two pushes of `DOWN` within 300 ms.
- `pedometer.rgb`: `RgbBoard(gpio)` switches the four direction LEDs (`Led`)
  and the three colour channels (`Colour`).
  - Each output keeps its own polarity: the LEDs are active low and the colour
    channels are active high.
- `pedometer.imu`: `Register` and `Lsm6ds(transfer)` for LSM6DS register access.
  - `transfer` sends one 16-bit word and returns the word received.
  - `write_byte` sends the address in the high byte and the value in the low
    byte.
  - `read_byte` sets the read bit on the address and returns the low byte
    received.
- `pedometer.scheduler`: a cooperative scheduler.
  - `hz_to_ticks` converts a frequency into a period on a 1 kHz tick.
  - `Scheduler(clock)` runs each `PeriodicTask` once the clock has passed the
    task's next run time, in the order the tasks were added.
  - The module also defines the task rates constants, such as
    `IMU_FREQUENCY_HZ`.
- `pedometer.framebuffer`: `Framebuffer(width, height)`, a monochrome buffer
  organised in 8-row pages.
  - It draws pixels, text with a `Font`, lines, polylines of `Vertex` points,
    arcs, circles, rectangles and bitmaps.
  - `invert_rectangle` raises `ValueError` for a rectangle that is off screen
    or has its corners in the wrong order.
- `pedometer.ssd1306`: `Ssd1306(bus, framebuffer)`.
  - `init()` sends the controller's set-up sequence, clears the screen and
    switches the panel on.
  - `update_screen()` sends the first page, and each `on_transfer_complete()`
    sends the next one.
  - The bus needs one method: `mem_write(device_address, mem_address, data)`.

## Examples

Counting steps from a stream of magnitudes:

```python
from pedometer.filter import MagnitudeWindow
from pedometer.peak_detection import PeakDetector

steps = 0

def count_step(increment):
    global steps
    steps += increment

window = MagnitudeWindow()
detector = PeakDetector(window, count_step)

samples = [16000] * 200 + [40000, 40000, 10000]
for magnitude in samples:
    window.update(magnitude)
    detector.execute()

print(steps)
```

Drawing and sending a frame:

```python
from pedometer.framebuffer import Color, Framebuffer
from pedometer.ssd1306 import Ssd1306

class RecordingBus:
    def __init__(self):
        self.writes = []

    def mem_write(self, device_address, mem_address, data):
        self.writes.append((device_address, mem_address, data))

fb = Framebuffer(128, 64)
display = Ssd1306(RecordingBus(), fb)
display.boot_delay = 0
display.init()

fb.draw_rectangle(0, 0, 127, 63, Color.WHITE)
fb.fill_circle(64, 32, 10, Color.WHITE)
display.update_screen()
while display.on_transfer_complete():
    pass
```

Running tasks off a tick clock:

```python
from pedometer.scheduler import Scheduler

ticks = iter(range(0, 10_000, 5))
scheduler = Scheduler(lambda: next(ticks))
scheduler.add(lambda: print("tick"), 4, first_run=0)
scheduler.run(iterations=100)
```

## What the package does not do

The package supplies the building blocks only. It has no command-line program
and no main loop that wires them together. It does not keep a step count, a goal
or display modes between screens. It does not lay out the screens shown on the
display, and it has no buzzer control. The `Framebuffer` takes any `Font` you
pass in, but the package ships no font data.

## Running the tests

```
pip install -e .[test]
pytest
```