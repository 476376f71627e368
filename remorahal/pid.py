"""Generic PID controller with proportional-on-measurement option."""

from dataclasses import dataclass

MAX_CHAN = 16
DEFAULT_NUM_CHAN = 3


@dataclass
class PidLoop:
    """One PID loop: its input and output pins plus internal state."""

    auto: bool = False
    p_on_m: bool = False
    direction: bool = False  # True means reverse acting
    setpoint: float = 0.0
    input: float = 0.0
    error: float = 0.0
    output: float = 0.0
    kp: float = 0.0
    ki: float = 0.0
    kd: float = 0.0
    sp_min: float = 0.0
    sp_max: float = 0.0
    cv_min: float = 0.0
    cv_max: float = 0.0
    in_auto: bool = False
    output_sum: float = 0.0
    last_input: float = 0.0

    def _clamp_output(self, value):
        if value > self.cv_max:
            return self.cv_max
        if value < self.cv_min:
            return self.cv_min
        return value

    def compute(self, period):
        """Run one step of the loop; period is in nanoseconds. Returns the output."""
        if period <= 0:
            raise ValueError("period must be positive")
        dt = period * 1e-9

        kp = self.kp
        ki = self.ki * dt
        kd = self.kd / dt
        if self.direction:
            kp, ki, kd = -kp, -ki, -kd

        new_auto = bool(self.auto)
        if new_auto and not self.in_auto:
            self.output_sum = self._clamp_output(self.output)
            self.last_input = self.input
        self.in_auto = new_auto

        if not self.in_auto:
            self.output = 0.0
            return self.output

        setpoint = self.setpoint
        if setpoint > self.sp_max:
            setpoint = self.sp_max
        elif setpoint < self.sp_min:
            setpoint = self.sp_min

        pv = self.input
        error = setpoint - pv
        self.error = error
        d_input = pv - self.last_input
        self.output_sum += ki * error
        if self.p_on_m:
            self.output_sum -= kp * d_input
        self.output_sum = self._clamp_output(self.output_sum)

        output = 0.0 if self.p_on_m else kp * error
        output += self.output_sum - kd * d_input
        output = self._clamp_output(output)
        if setpoint == 0:
            output = 0.0
        self.output = output
        self.last_input = pv
        return output


def channel_names(num_chan=0, names=None):
    """Return the name prefix of each loop from a count or an explicit list."""
    names = list(names or [])
    if num_chan and names:
        raise ValueError("num_chan and names are mutually exclusive")
    if not num_chan and not names:
        num_chan = DEFAULT_NUM_CHAN

    if num_chan:
        howmany = num_chan
        result = [f"pid.{n}" for n in range(max(howmany, 0))]
    else:
        result = []
        for name in names[:MAX_CHAN]:
            if not name:
                break
            result.append(name)
        howmany = len(result)

    if howmany <= 0 or howmany > MAX_CHAN:
        raise ValueError(f"invalid number of channels: {howmany}")
    return result


def build_loops(num_chan=0, names=None):
    """Create a PidLoop for each channel, keyed by its name prefix."""
    return {name: PidLoop() for name in channel_names(num_chan, names)}