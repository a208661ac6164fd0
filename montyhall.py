import copy
import enum
import pprint
from collections import defaultdict

import numpy as np


class InvariantError(RuntimeError):
    """A scenario broke one of the puzzle's structural rules"""


class ConfigError(ValueError):
    """The simulation configuration can't produce a meaningful run"""


class Door(enum.Enum):
    PRIZE = 'prize'
    GOAT = 'goat'

    def __repr__(self):
        return self.name.capitalize()


class Scenario:
    def __init__(self, doors, first_guess, reveal_door):
        """A single fixed game setup, hashable so it can key the outcome table
        doors: sequence of Door, exactly one of which is the prize
        first_guess (int): index of the door the player picks first
        reveal_door (int): index of the goat door the host opens
        """
        self._doors = tuple(doors)
        self._first_guess = int(first_guess)
        self._reveal_door = int(reveal_door)

        for name, idx in [('first_guess', self._first_guess),
                          ('reveal_door', self._reveal_door)]:
            if not 0 <= idx < len(self._doors):
                raise InvariantError(f"{name} {idx} is not a door in {self._doors}")
        if self._doors.count(Door.PRIZE) != 1:
            raise InvariantError(f"Expected exactly one prize in {self._doors}")
        if self._reveal_door == self._first_guess:
            raise InvariantError(f"Host revealed the first guess {self._first_guess}")
        if self._doors[self._reveal_door] is not Door.GOAT:
            raise InvariantError(f"Host revealed a prize at {self._reveal_door}")

    @classmethod
    def random(cls, rng, door_count=3):
        """Place the prize, take a first guess, then have the host open a goat"""
        doors = [Door.GOAT] * door_count
        doors[rng.integers(door_count)] = Door.PRIZE

        # Independent of the prize, so it may land on it
        first_guess = int(rng.integers(door_count))

        # Any goat the player didn't pick; usually a single candidate
        options = [idx for idx, door in enumerate(doors)
                   if idx != first_guess and door is Door.GOAT]
        if not options:
            raise InvariantError(f"No goat to reveal in {doors} for guess {first_guess}")
        reveal_door = options[rng.integers(len(options))]

        return cls(doors, first_guess, reveal_door)

    @property
    def doors(self):
        return self._doors

    @property
    def first_guess(self):
        return self._first_guess

    @property
    def reveal_door(self):
        return self._reveal_door

    def _key(self):
        return (self._doors, self._first_guess, self._reveal_door)

    def __eq__(self, other):
        if not isinstance(other, Scenario):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return (f"Scenario {{ doors: {list(self._doors)}, "
                f"first_guess: {self._first_guess}, reveal_door: {self._reveal_door} }}")

    def is_win(self, guess):
        return self._doors[guess] is Door.PRIZE

    def first_guess_win(self):
        return self.is_win(self._first_guess)

    def unrevealed_door(self):
        for idx in range(len(self._doors)):
            if idx != self._first_guess and idx != self._reveal_door:
                return idx
        raise InvariantError(f"No unrevealed door left in {self!r}")


class Outcome:
    FIELDS = ('first_guess_win', 'remaining_doors_guess_win', 'swap_guess_win')

    def __init__(self):
        self.occurrences = 0
        self.first_guess_win = 0
        self.remaining_doors_guess_win = 0
        self.swap_guess_win = 0

    def update(self, scenario, remaining_doors_guess, swap_guess):
        self.occurrences += 1
        self.first_guess_win += scenario.first_guess_win()
        self.remaining_doors_guess_win += scenario.is_win(remaining_doors_guess)
        self.swap_guess_win += scenario.is_win(swap_guess)

    def win_rates(self):
        """Percentage of occurrences won by each strategy, or None before any trial"""
        if not self.occurrences:
            return {field: None for field in self.FIELDS}
        return {field: getattr(self, field) / self.occurrences * 100
                for field in self.FIELDS}

    def __str__(self):
        lines = [f"  occurrences: {self.occurrences}"]
        for field, rate in self.win_rates().items():
            lines.append(f"  {field}: " + ("n/a" if rate is None else f"{rate:.1f}%"))
        return ",\n".join(lines)


def banner(text):
    stars = '*' * (len(text) + 4)
    return f"{stars}\n*** {text}\n{stars}"


class Simulation:
    def __init__(self, config, rng=None):
        """Configure a batch of trials
        config: dict with 'iterations', 'rules' ('door_count'), 'seed' and 'verbose'
        rng: numpy Generator to draw from; built from config['seed'] when omitted
        """
        self.config = copy.deepcopy(config)
        self.config.setdefault('rules', {})
        self.config['rules'].setdefault('door_count', 3)
        self.iterations = self.config.get('iterations', 1_000_000)
        self.door_count = self.config['rules']['door_count']
        self.verbose = self.config.get('verbose', 0)
        self.validate()

        self.rng = rng or np.random.default_rng(self.config.get('seed'))

        # Data collection
        self.total = Outcome()
        self.outcomes = defaultdict(Outcome)

    def validate(self):
        for name, value, minimum in [('iterations', self.iterations, 1),
                                     ('door_count', self.door_count, 3)]:
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if value < minimum:
                raise ConfigError(f"{name} must be at least {minimum}, got {value}")

    def header(self):
        seed = self.config.get('seed')
        print(f"\n--- Simulating {self.iterations} trials with {self.door_count} doors ---")
        print(f"--- Random seed: {'fresh entropy' if seed is None else seed} ---")

    def record(self, scenario, remaining_doors_guess, swap_guess):
        self.total.update(scenario, remaining_doors_guess, swap_guess)
        self.outcomes[scenario].update(scenario, remaining_doors_guess, swap_guess)

    def trial(self):
        """Play one game and tally it for every strategy at once"""
        scenario = Scenario.random(self.rng, self.door_count)
        unrevealed_door = scenario.unrevealed_door()

        # Re-guess among the closed doors with no stay/switch framing
        options = [scenario.first_guess, unrevealed_door]
        remaining_doors_guess = options[self.rng.integers(len(options))]
        swap_guess = unrevealed_door

        if self.verbose > 1:
            pprint.pprint({'scenario': scenario,
                           'remaining_doors_guess': remaining_doors_guess,
                           'swap_guess': swap_guess})

        self.record(scenario, remaining_doors_guess, swap_guess)
        return scenario, remaining_doors_guess, swap_guess

    def simulate(self, n=None):
        if n is None:
            n = self.iterations
        if self.verbose:
            print(f"Running {n} trials")
        for _ in range(n):
            self.trial()
        if self.verbose:
            print(f"Finished with {len(self.outcomes)} distinct scenarios")

    def sections(self):
        """Split the outcome table by whether the first guess found the prize"""
        wins = [(s, o) for s, o in self.outcomes.items() if s.first_guess_win()]
        losses = [(s, o) for s, o in self.outcomes.items() if not s.first_guess_win()]
        return wins, losses

    def report(self):
        wins, losses = self.sections()
        lines = []
        for title, entries in [("First guess wins", wins), ("First guess loses", losses)]:
            lines.append(banner(title))
            for scenario, outcome in entries:
                lines += [repr(scenario), str(outcome), ""]
            lines.append("")
        lines += ["Total:", str(self.total)]
        return "\n".join(lines)

    def pstats(self):
        print(self.report())


DEFAULT_CONFIG = {
    'iterations': 1_000_000,
    'rules': {'door_count': 3},
    'seed': None,
    'verbose': 0,
}


def main(config=None):
    simulator = Simulation(config or DEFAULT_CONFIG)
    if simulator.verbose:
        simulator.header()
    simulator.simulate()
    simulator.pstats()
