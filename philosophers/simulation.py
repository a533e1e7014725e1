"""Threaded dining-philosophers simulation with a monitoring loop."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from philosophers.config import Settings

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"
DIED = "died"


def get_time() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def _sleep_ms(milliseconds: float) -> None:
    time.sleep(milliseconds / 1000)


class Philosopher:
    """One diner sharing a fork on each side with its neighbours."""

    def __init__(
        self,
        simulation: Simulation,
        id: int,
        left_fork: threading.Lock,
        right_fork: threading.Lock,
    ) -> None:
        self.simulation = simulation
        self.id = id
        self.eat_count = 0
        self.last_meal = simulation.start_time
        self.left_fork = left_fork
        self.right_fork = right_fork
        self.meal_lock = threading.Lock()

    def _say(self, status: str) -> None:
        self.simulation.print_status(self, status)

    def eat(self) -> None:
        """Take both forks, eat for the configured time, then put them down."""
        if self.id % 2 == 0:
            first, second = self.left_fork, self.right_fork
        else:
            first, second = self.right_fork, self.left_fork
        with first:
            self._say(TAKEN_FORK)
            with second:
                self._say(TAKEN_FORK)
                self._say(EATING)
                with self.meal_lock:
                    self.last_meal = get_time()
                    self.eat_count += 1
                _sleep_ms(self.simulation.settings.eat_time)

    def _eat_alone(self) -> None:
        # A lone philosopher has a single fork and can only wait to starve.
        with self.left_fork:
            self._say(TAKEN_FORK)
            _sleep_ms(self.simulation.settings.die_time)

    def should_exit(self) -> bool:
        """True once the run is over, this philosopher starved, or it ate enough."""
        if self.simulation.check_death(self):
            return True
        meals = self.simulation.settings.meals
        return meals is not None and self.eat_count >= meals

    def run(self) -> None:
        """The eat, sleep, think cycle executed by the philosopher's thread."""
        settings = self.simulation.settings
        if settings.philo_num == 1:
            self._eat_alone()
            return
        if self.id % 2 == 0:
            _sleep_ms(settings.eat_time / 2)
        while not self.should_exit():
            self.eat()
            if self.simulation.check_death(self):
                break
            self._say(SLEEPING)
            _sleep_ms(settings.sleep_time)
            if self.simulation.check_death(self):
                break
            self._say(THINKING)


class Simulation:
    """Shared table state: forks, philosophers, the end flag and the output."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = sys.stdout if out is None else out
        self.start_time = get_time()
        self._dead = False
        self._dead_lock = threading.Lock()
        self._print_lock = threading.Lock()
        count = settings.philo_num
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(self, index + 1, self.forks[index], self.forks[(index + 1) % count])
            for index in range(count)
        ]

    def is_over(self) -> bool:
        """True once a philosopher died or everyone ate enough."""
        with self._dead_lock:
            return self._dead

    def end(self) -> None:
        """Mark the run as finished."""
        with self._dead_lock:
            self._dead = True

    def _emit(self, philosopher: Philosopher, status: str) -> None:
        timestamp = get_time() - self.start_time
        print(f"{timestamp} {philosopher.id} {status}", file=self.out, flush=True)

    def print_status(self, philosopher: Philosopher, status: str) -> None:
        """Log a status line unless the run is already over."""
        with self._print_lock:
            if self.is_over():
                return
            self._emit(philosopher, status)

    def _since_meal(self, philosopher: Philosopher) -> int:
        with philosopher.meal_lock:
            return get_time() - philosopher.last_meal

    def check_death(self, philosopher: Philosopher) -> bool:
        """True if the run is over or *philosopher* has gone too long unfed."""
        if self.is_over():
            return True
        return self._since_meal(philosopher) > self.settings.die_time

    def check_philo_death(self, philosopher: Philosopher) -> bool:
        """Detect starvation; on death end the run and announce it."""
        if self._since_meal(philosopher) <= self.settings.die_time:
            return False
        self.end()
        with self._print_lock:
            self._emit(philosopher, DIED)
        return True

    def all_fed(self) -> bool:
        """True when a meal limit is set and every philosopher reached it."""
        meals = self.settings.meals
        if meals is None:
            return False
        for philosopher in self.philosophers:
            with philosopher.meal_lock:
                if philosopher.eat_count < meals:
                    return False
        return True

    def track(self) -> None:
        """Watch the table until someone dies or everyone has eaten enough."""
        while True:
            if any(self.check_philo_death(p) for p in self.philosophers):
                return
            if self.all_fed():
                self.end()
                return
            _sleep_ms(1)

    def run(self) -> None:
        """Start every philosopher, monitor them, and wait for them to finish."""
        threads: list[threading.Thread] = []
        try:
            for philosopher in self.philosophers:
                thread = threading.Thread(
                    target=philosopher.run,
                    name=f"philosopher-{philosopher.id}",
                    daemon=True,
                )
                thread.start()
                threads.append(thread)
        except RuntimeError as exc:
            self.end()
            for thread in threads:
                thread.join()
            raise RuntimeError("Error: Failed to start threads") from exc
        self.track()
        for thread in threads:
            thread.join()