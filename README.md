# oledarcade

A small arcade console built around a simulated 128x64 monochrome display,
a two-axis joystick with a push switch and a byte-addressed record store.
It has three screens behind a start menu:

- **Super Car**: steer your car between the road edges and dodge the
  oncoming traffic. Every car that passes scores a point.
- **Pong**: keep the ball in play with the paddle along the bottom edge.
- **Records**: games played and best score for each game, read from the store.

The display keeps a 1024-byte frame buffer laid out as eight pages of 128
columns, one bit per pixel. It draws text in the bundled fonts, lines,
rectangles, rounded rectangles, circles and bitmaps.
`Display.render_text()` turns the frame into 64 lines of `#` and `.`.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Running

The `oledarcade` command plays the console from scripted joystick input.
Each character of `--input` is one reading of the stick:

| character | meaning            |
|-----------|--------------------|
| `u` `d`   | stick up / down    |
| `l` `r`   | stick left / right |
| `.`       | stick idle         |
| `p`       | press the switch   |

Whitespace is ignored; any other character is an error. The run ends when
the input is used up.

```
oledarcade --input "dp....p" --seed 1 --show
```

This moves the menu pointer down to Pong, picks it, plays four frames and
leaves the game with the next press.

Options:

- `--input TEXT`: the readings, as above.
- `--eeprom FILE`: load the record store from `FILE` if it exists, and write
  it back there when the run ends.
- `--seed N`: seed for the random source the games use.
- `--delay`: wait in real time between frames (by default no time passes).
- `--show`: print the final screen as text.

## Using the pieces

```python
from oledarcade.display import Display
from oledarcade.fonts import SMALL_FONT

display = Display(sink=lambda control, payload: None)
display.begin()
display.set_font(SMALL_FONT)
display.draw_rect(10, 10, 40, 30)
display.draw_circle(64, 32, 8)
display.print("Hi", 50, 50)
print(display.render_text())
```

- `oledarcade.display.Display` holds the frame buffer and the drawing calls.
  Its optional `sink` callable receives a control byte and a payload: `0x00`
  with each command byte, and `0x40` with the whole 1024-byte frame on
  `update()`.
- `oledarcade.fonts` holds the bundled fonts `SMALL_FONT`, `TINY_FONT`,
  `MEDIUM_NUMBERS` and `BIG_NUMBERS` as `Font` objects; `load_font` parses a
  font blob.
- `oledarcade.joystick.classify(x, y)` turns raw 0..1023 axis readings into a
  `Direction`. `Joystick` wraps a function returning the `(x, y)` readings
  and a function returning the switch level (0 while pressed).
- `oledarcade.storage.Eeprom` is the record store; it can be saved to a file
  and loaded again. `initialise_records` zeroes the counters on first use.
- `oledarcade.car.CarGame`, `oledarcade.pong.PongGame`,
  `oledarcade.records.RecordPage` and `oledarcade.menu.MainWindow` are the
  screens.
- `oledarcade.app.GameConsole` ties them together; `loop_once()` shows one
  menu frame and runs whatever was picked, `run()` loops forever.

Every screen takes its `sleep` function, and the games take their random
source (`rng`), as arguments, so the games can be driven frame by frame with
`step()` and no real delays.

## What it does not do

- There is no driver for a real panel or joystick: the display only hands
  bytes to the `sink` you give it, and the joystick reads whatever functions
  you pass in.
- There is no interactive terminal mode; the command only plays scripted
  input.
- The Records screen never reads the stick, so it waits for a switch press
  that scripted input cannot deliver: picking it from the command line does
  not return.