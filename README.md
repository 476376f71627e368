# remorahal

Pure-Python building blocks for a machine controller that works with a
Remora-style motion board: PID control, encoder position capture, handwheel
pendant packets, Raspberry Pi board detection and the register logic of the
RP1 GPIO block found on the Raspberry Pi 5.

Nothing here needs special hardware to import or to test. The controller
pieces are plain objects that you drive from your own periodic loop, passing
the period in nanoseconds.

## Modules

### `remorahal.protocol`

Constants of the motion-board link (`JOINTS`, `VARIABLES`,
`DIGITAL_OUTPUTS`, `DIGITAL_INPUTS`, the payload headers `PRU_DATA`,
`PRU_READ`, `PRU_WRITE`, `PRU_ESTOP`, the step-generator constants
`STEPBIT`, `STEP_MASK`, `STEP_OFFSET` and `PRU_BASEFREQ`).

Payload headers are four ASCII characters packed big-endian into a 32-bit
word:

```python
from remorahal.protocol import encode_tag, decode_tag

encode_tag("data")        # 0x64617461
decode_tag(0x72656164)    # "read"
```

Both raise `ValueError` for tags that are not exactly four ASCII characters
or values that do not fit in 32 bits.

### `remorahal.boards`

Identifies the board from a device-tree `compatible` list, a buffer of
NUL-separated entries such as `b"raspberrypi,5-model-b\0brcm,bcm2712\0"`.

- `parse_compatible(data)` splits bytes or text into its non-empty entries.
- `detect_board(data)` returns a `Board` (with `model`, `soc`, `compatible`
  and `supported`, true for the Pi 3 generation and newer), or `None` when no
  known Raspberry Pi model is listed. Where the list names no SoC, the SoC is
  taken from the model when the model fixes it.
- `read_compatible(path)` reads and splits the list from a file, by default
  `/proc/device-tree/compatible`.

### `remorahal.pid`

`PidLoop` is a PID controller with setpoint and output clamping, forward or
reverse action (`direction`), proportional-on-error or
proportional-on-measurement (`p_on_m`), and a smooth start when `auto` is
switched on: the integral term starts from the current output. In manual
mode, and whenever the setpoint is zero, the output is zero.
`PidLoop.compute(period)` runs one step and returns the output.

`channel_names(num_chan, names)` gives the loop names, either by count
(`pid.0`, `pid.1`, ...) or from an explicit list (stopping at the first
empty name). Giving both is an error, giving neither yields three loops, and
more than sixteen is rejected. `build_loops(num_chan, names)` returns a dict
of fresh `PidLoop` objects keyed by those names.

### `remorahal.nvmpg`

Support for a networked handwheel pendant.

- `MpgPacket` is the 57-byte datagram sent to the pendant, with
  `MpgPacket.pack()` and `MpgPacket.unpack(data)`.
- `MpgPins` holds the inputs and outputs the pendant logic reads and writes.
- `Nvmpg(pins, send)` runs the pendant logic. `Nvmpg.update(period)` runs at
  the rate set by `pins.update_freq`; it compares the inputs with those last
  sent, steps the selected axis (X to C) on the axis buttons and the jog
  multiplier (x1, x10, x100, x1000, setting `mpg_scale`) on the multiplier
  button, and when something changed and `comms_status` is set, builds a
  packet, passes it to `send` and returns its bytes; otherwise it returns
  `None`. Send errors are logged, not raised.
- `open_socket(address, port, local_port, timeout)` opens a UDP socket bound
  to `local_port` and connected to the pendant, by default `10.10.10.10`,
  port 27182, with a 50 µs timeout. Pass its `send` method to `Nvmpg`.

### `remorahal.encoder`

`Encoder` turns a raw count into a scaled position and a velocity, honouring
the `reset` and `index_enable` / `phase_z` inputs; a scale too close to zero
is replaced by 1.0. `EncoderBank(num_encoder, names)` holds a set of encoders
and captures them all with `EncoderBank.capture(period)`, returning their
positions by name. `encoder_names(num_encoder, names)` configures the set by
count (`encoder.0`, ...) or by name, with a default of three and a limit of
eight.

### `remorahal.gpio` and `remorahal.rp1`

`remorahal.gpio` defines the enumerations `FunctionSelect`, `Pull`,
`Direction` and `Drive`, and `function_names(gpio)` lists the nine alternate
functions of an RP1 pin (`None` where a slot is unused).

`remorahal.rp1.Rp1Gpio(base)` implements the RP1 GPIO register layout over a
32-bit word-addressed register window: `count`, `get_fsel` / `set_fsel`,
`get_dir` / `set_dir`, `get_drive` / `set_drive`, `get_pull` / `set_pull`,
`get_level` (which returns `None` when the pad's input is disabled),
`get_name` and `get_fsel_name`. `base` may be any writable buffer, such as an
`mmap` or `bytearray`, or a list of words; without it an all-zero in-memory
register file is used. `bank_for(gpio)` maps one of the 54 pins to its bank
and offset.

## What this package does not do

- It has no command-line program and no real-time scheduler: you call
  `compute`, `capture` and `update` from your own loop.
- It does not talk to the motion board itself; `remorahal.protocol` only
  provides the constants and header tags.
- `Rp1Gpio` does not open or map device memory; you supply the register
  window.

## Requirements

Python 3.10 or later. The package has no runtime dependencies; the test
suite uses pytest (`pip install remorahal[test]`).