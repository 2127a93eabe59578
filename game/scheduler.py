from config import TICK_MS


class TickScheduler:
    """Fixed-interval tick source fed with frame times.

    The main loop reports elapsed milliseconds each frame and gets back how
    many ticks fell due. Leftover time carries over, so ticks stay on a
    steady 150 ms grid no matter the frame rate.
    """

    def __init__(self, interval_ms=TICK_MS):
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self.running = False
        self._elapsed = 0

    def start(self):
        """Start ticking; the first tick comes one full interval later."""
        if not self.running:
            self.running = True
            self._elapsed = 0

    def stop(self):
        self.running = False
        self._elapsed = 0

    def update(self, elapsed_ms):
        """Add frame time and return the number of ticks now due."""
        if not self.running:
            return 0
        self._elapsed += max(0, elapsed_ms)
        due, self._elapsed = divmod(self._elapsed, self.interval_ms)
        return int(due)
