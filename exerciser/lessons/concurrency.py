"""Threads: shared data, timed workers, a shared counter and channels."""

from __future__ import annotations

import queue as channels
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Sequence

_DONE = object()


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every `workers`-th number from each offset, one thread per offset."""
    lock = threading.Lock()

    def summed(offset: int) -> int:
        with lock:
            total = sum(n for n in numbers if n % workers == offset)
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(summed, range(workers)))


def timed_threads(count: int = 10, delay: float = 0.25) -> list[int]:
    """Run threads that each sleep `delay` seconds; return their durations in ms."""

    def work(index: int) -> int:
        start = time.perf_counter()
        time.sleep(delay)
        print(f"thread {index} is complete")
        return int((time.perf_counter() - start) * 1000)

    with ThreadPoolExecutor(max_workers=max(count, 1)) as pool:
        return list(pool.map(work, range(count)))


@dataclass
class _JobStatus:
    jobs_completed: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock)


def count_jobs(count: int = 10, delay: float = 0.25) -> int:
    """Run jobs in threads that update a shared counter; return the final count."""
    status = _JobStatus()

    def job() -> None:
        time.sleep(delay)
        with status.lock:
            status.jobs_completed += 1

    threads = [threading.Thread(target=job) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
        with status.lock:
            print(f"jobs completed {status.jobs_completed}")
    return status.jobs_completed


@dataclass
class Queue:
    """Values to send, split into two halves, with a pause between sends."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])
    delay: float = 1.0


def send_tx(queue: Queue, channel: channels.Queue) -> list[threading.Thread]:
    """Send both halves into the channel from two threads.

    Each thread puts a completion marker after its values; the started
    threads are returned.
    """

    def sender(values: list[int]) -> None:
        for value in values:
            print(f"sending {value}")
            channel.put(value)
            time.sleep(queue.delay)
        channel.put(_DONE)

    threads = [
        threading.Thread(target=sender, args=(queue.first_half,)),
        threading.Thread(target=sender, args=(queue.second_half,)),
    ]
    for thread in threads:
        thread.start()
    return threads


def receive_all(queue: Queue) -> list[int]:
    """Send the queue's values over a channel and return them as received."""
    channel: channels.Queue = channels.Queue()
    senders = send_tx(queue, channel)
    received: list[int] = []
    finished = 0
    while finished < len(senders):
        item = channel.get()
        if item is _DONE:
            finished += 1
            continue
        print(f"Got: {item}")
        received.append(item)
    for thread in senders:
        thread.join()
    print(f"total numbers received: {len(received)}")
    return received