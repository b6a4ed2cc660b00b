"""Terminal visualizer for spring curves.

Polls the curve at a fixed interval of wall time and draws a bar of ``#``
characters proportional to the curve value.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
import math
import sys
import time
from typing import TextIO

from springr.core.curves.models import CurveParams
from springr.core.curves.oscillator import evaluate_params


def iter_frames(
    params: CurveParams, duration_ms: int, interval_ms: int
) -> Iterator[tuple[float, float]]:
    """Yield (normalized time, curve value) for each frame of an animation.

    Frames are taken at 0, interval_ms, 2 * interval_ms, ... while the
    elapsed time is below duration_ms.
    """
    if duration_ms <= 0:
        raise ValueError("duration_ms must be > 0")
    if interval_ms <= 0:
        raise ValueError("interval_ms must be > 0")

    elapsed = 0
    while elapsed < duration_ms:
        t = elapsed / duration_ms
        yield t, evaluate_params(params, t)
        elapsed += interval_ms


def render_bar(value: float, width: int) -> str:
    """Render a curve value as a bar, ``width`` characters long at value 1.

    Rounds half away from zero. Values below zero render as an empty bar.
    """
    points = math.floor(width * value + 0.5)
    return "#" * max(points, 0)


def animate(
    params: CurveParams,
    duration_ms: int,
    *,
    width: int = 150,
    interval_ms: int = 32,
    running_mode: bool = True,
    stream: TextIO | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Play the curve as a terminal animation.

    Args:
        params: Oscillator parameters.
        duration_ms: Length of the animation in wall time.
        width: Bar length at curve value 1.
        interval_ms: Time between frames.
        running_mode: If True print one line per frame, otherwise redraw
            the same line.
        stream: Output stream (default: stdout).
        sleep: Sleep function, called with seconds between frames.

    Returns:
        Number of frames drawn.
    """
    out = stream if stream is not None else sys.stdout
    frames = 0
    previous_len = 0

    for _, value in iter_frames(params, duration_ms, interval_ms):
        bar = render_bar(value, width)
        if running_mode:
            out.write(bar + "\n")
        else:
            # Pad so a shorter bar fully covers the previous one
            out.write(bar.ljust(previous_len) + "\r")
            previous_len = len(bar)
        out.flush()
        frames += 1
        sleep(interval_ms / 1000)

    if not running_mode:
        out.write("\n")
        out.flush()

    return frames
