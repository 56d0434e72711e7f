"""The readers-writers problem: shared reading, exclusive writing."""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass

__all__ = ["Event", "ReaderWriterLock", "run_simulation", "main"]

_WRITER_HEAD_START = 0.05


class ReaderWriterLock:
    """Many readers at once, or one writer alone."""

    def __init__(self) -> None:
        self._condition = threading.Condition()
        self._readers = 0
        self._writing = False

    @contextmanager
    def read(self) -> Iterator[None]:
        """Hold the lock for reading; waits while a writer is active."""
        with self._condition:
            self._condition.wait_for(lambda: not self._writing)
            self._readers += 1
        try:
            yield
        finally:
            with self._condition:
                self._readers -= 1
                if self._readers == 0:
                    self._condition.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        """Hold the lock for writing; waits until no reader or writer is active."""
        with self._condition:
            self._condition.wait_for(lambda: self._readers == 0 and not self._writing)
            self._writing = True
        try:
            yield
        finally:
            with self._condition:
                self._writing = False
                self._condition.notify_all()


@dataclass(frozen=True)
class Event:
    """One step of a simulated reader or writer."""

    role: str
    number: int
    action: str

    def __str__(self) -> str:
        if self.role == "writer":
            return f"writer {self.action}"
        return f"reader {self.number} {self.action}"


def run_simulation(readers: int = 5, seed: int | None = None) -> list[Event]:
    """Run reader threads and one writer over a shared lock.

    Two readers start first, then the writer, then after a short pause the
    remaining readers. Each works for up to 0.1 s. Returns the events in
    the order they happened.
    """
    if readers < 0:
        raise ValueError("readers must not be negative")
    rng = random.Random(seed)
    delays = {number: rng.randrange(100) / 1000 for number in range(1, readers + 1)}
    writer_delay = rng.randrange(100) / 1000
    lock = ReaderWriterLock()
    log: list[Event] = []
    log_lock = threading.Lock()

    def record(role: str, number: int, action: str) -> None:
        with log_lock:
            log.append(Event(role, number, action))

    def reader(number: int) -> None:
        record("reader", number, "waiting")
        with lock.read():
            record("reader", number, "start")
            time.sleep(delays[number])
            record("reader", number, "end")

    def writer() -> None:
        record("writer", 0, "waiting")
        with lock.write():
            record("writer", 0, "start")
            time.sleep(writer_delay)
            record("writer", 0, "end")

    early = min(2, readers)
    threads = [threading.Thread(target=reader, args=(n,)) for n in range(1, early + 1)]
    threads.append(threading.Thread(target=writer))
    for thread in threads:
        thread.start()
    time.sleep(_WRITER_HEAD_START)
    late = [threading.Thread(target=reader, args=(n,)) for n in range(early + 1, readers + 1)]
    for thread in late:
        thread.start()
    for thread in threads + late:
        thread.join()
    return log


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation and print what each thread did."""
    parser = argparse.ArgumentParser(prog="readers-writers", description="Simulate readers and a writer.")
    parser.add_argument("--readers", type=int, default=5, help="number of readers")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    try:
        events = run_simulation(args.readers, args.seed)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    for event in events:
        print(event)
    return 0


if __name__ == "__main__":
    sys.exit(main())