# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in its own thread. The forks between philosophers are locks. A monitor loop watches for any philosopher who has gone too long without eating.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

The same entry point can also be started with `python -m philosophers.cli`.

All times are in milliseconds. Every argument must be a string of decimal digits whose value is between 1 and 2147483647.

Example:

```
philo 5 800 200 200 7
```

Each event is printed to standard output as one line. The line holds three things:

- the milliseconds since the simulation started,
- the philosopher's number, counted from 1,
- the status.

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
400 1 is thinking
```

The possible statuses are:

- `has taken a fork`
- `is eating`
- `is sleeping`
- `is thinking`
- `died`

The simulation stops in either of two cases:

- The monitor finds a philosopher whose time since their last meal exceeds `time_to_die`. It then prints `<time> <id> died`.
- The meal count was given, and every philosopher has eaten that many times.

No status lines are printed once the simulation has stopped.

A single philosopher has only one fork. That philosopher takes it and waits until starving.

Even-numbered philosophers start half an eating period late. They pick up their left fork first. Odd-numbered philosophers pick up their right fork first.

### Errors

Invalid input prints a message that starts with `Error:` to standard error, and the command exits with status 1. The cases are:

- a wrong number of arguments (`Error: Invalid number of arguments`),
- an empty argument (`Error: Empty argument`),
- any non-digit character, including a sign (`Error: Arguments must be positive numbers`),
- a value of 0 or above 2147483647 (`Error: Argument out of valid integer range`).

A failure to start the philosopher threads prints `Error: Failed to start threads` and also exits with status 1. A normal run exits with status 0.

## Using it from Python

```python
import io

from philosophers.config import parse_settings
from philosophers.simulation import Simulation

settings = parse_settings(["4", "410", "200", "200", "3"])
out = io.StringIO()
Simulation(settings, out).run()
print(out.getvalue())
```

The modules are:

- `philosophers.validation`
  - `validate_arg(text)` checks one argument string and returns its integer value.
  - `validate_args(args)` does the same for a sequence of arguments. It raises `ArgumentError` (a `ValueError`) for the first bad one.
- `philosophers.config`
  - `parse_settings(args)` takes the four or five arguments that follow the program name and returns a frozen `Settings` dataclass.
  - `Settings` has the fields `philo_num`, `die_time`, `eat_time`, `sleep_time` and `meals`; `meals` is `None` when there is no limit.
  - Building `Settings` directly with a non-positive value raises `ArgumentError`.
- `philosophers.simulation`
  - `Simulation(settings, out)` sets up the forks and the `Philosopher` objects. Output goes to `out`, which defaults to standard output.
  - `run()` starts the threads, monitors them with `track()`, and joins them.
  - `is_over()`, `end()`, `check_death()`, `check_philo_death()` and `all_fed()` expose the state that the monitor uses.
  - `get_time()` returns wall-clock milliseconds.
- `philosophers.cli`
  - `main(argv=None)` is the command-line entry point and returns the exit status.

## Running the tests

```
pip install .[test]
pytest
```