import dataclasses
import logging
import time

logger = logging.getLogger(__name__)

MAX_CYLINDERS = 8


@dataclasses.dataclass
class GasMix:
    o2: int = 0  # permille, 0 means air
    he: int = 0  # permille

    def __repr__(self):
        if not self.o2 and not self.he:
            return "air"
        if not self.he:
            return f"EAN{self.o2 / 10:.0f}"
        return f"Tx{self.o2 / 10:.0f}/{self.he / 10:.0f}"


@dataclasses.dataclass
class Cylinder:
    size: int = 0  # ml
    workpressure: int = 0  # mbar
    description: str | None = None
    start: int = 0  # mbar
    end: int = 0  # mbar
    gasmix: GasMix = dataclasses.field(default_factory=GasMix)

    @property
    def is_empty(self):
        return not (
            self.size
            or self.workpressure
            or self.description
            or self.start
            or self.end
            or self.gasmix.o2
            or self.gasmix.he
        )


@dataclasses.dataclass
class Sample:
    time: int  # seconds
    depth: int  # mm
    temperature: int = 0  # mkelvin
    pressure: int = 0  # mbar


class Dive:
    when: int
    maxdepth: int
    meandepth: int
    duration: int
    watertemp: int
    number: int

    location: str | None
    buddy: str | None
    divemaster: str | None
    notes: str | None

    cylinders: list[Cylinder]
    samples: list[Sample]

    def __init__(
        self,
        when=0,
        maxdepth=0,
        meandepth=0,
        duration=0,
        watertemp=0,
        number=0,
        location=None,
        buddy=None,
        divemaster=None,
        notes=None,
        cylinders=None,
        samples=None,
    ):
        self.when = when
        self.maxdepth = maxdepth
        self.meandepth = meandepth
        self.duration = duration
        self.watertemp = watertemp
        self.number = number
        self.location = location
        self.buddy = buddy
        self.divemaster = divemaster
        self.notes = notes

        cylinders = list(cylinders or [])
        if len(cylinders) > MAX_CYLINDERS:
            raise ValueError(f"a dive holds at most {MAX_CYLINDERS} cylinders")
        cylinders += [Cylinder() for _ in range(MAX_CYLINDERS - len(cylinders))]
        self.cylinders = cylinders
        self.samples = list(samples or [])

    @property
    def first_cylinder(self):
        return self.cylinders[0]

    @property
    def used_cylinders(self):
        return [cylinder for cylinder in self.cylinders if not cylinder.is_empty]

    def fixup(self):
        """Fill in depth and duration from the samples where the log omitted them."""
        if not self.samples:
            return self
        if not self.duration:
            self.duration = self.samples[-1].time
        if not self.maxdepth:
            self.maxdepth = max(sample.depth for sample in self.samples)
        if not self.meandepth and self.duration:
            area = 0
            for previous, sample in zip(self.samples, self.samples[1:]):
                area += (previous.depth + sample.depth) / 2 * (sample.time - previous.time)
            self.meandepth = round(area / self.duration)
        if not self.watertemp:
            temperatures = [s.temperature for s in self.samples if s.temperature]
            if temperatures:
                self.watertemp = min(temperatures)
        return self

    def __repr__(self):
        when = time.strftime("%Y-%m-%d %H:%M", time.gmtime(self.when))
        return f"Dive #{self.number} @ {when} - {self.maxdepth / 1000:.1f} m for {self.duration // 60} mins"


class DiveTable:
    """Ordered collection of every dive known to the application."""

    dives: list[Dive]

    def __init__(self, dives=None):
        self.dives = list(dives or [])

    def __len__(self):
        return len(self.dives)

    def __iter__(self):
        return iter(self.dives)

    def __getitem__(self, index):
        return self.dives[index]

    def get(self, index):
        if index is None or index < 0 or index >= len(self.dives):
            return None
        return self.dives[index]

    def index(self, dive):
        for i, candidate in enumerate(self.dives):
            if candidate is dive:
                return i
        return -1

    def append(self, dive: Dive):
        self.dives.append(dive)

    def insert(self, index, dive: Dive):
        self.dives.insert(index, dive)

    def remove(self, dive: Dive):
        index = self.index(dive)
        if index < 0:
            raise ValueError(f"{dive!r} is not in the dive table")
        self.dives.pop(index)

    def sort(self):
        self.dives.sort(key=lambda dive: dive.when)

    def renumber(self, start):
        logger.info(f"renumber {len(self.dives)} dives starting at {start}")
        for number, dive in enumerate(self.dives, start=start):
            dive.number = number
