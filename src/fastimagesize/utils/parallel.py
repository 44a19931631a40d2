"""Parallel processing utilities.

Batch processing pattern adapted from CAMEL-AI MarkItDownLoader
(camel/loaders/markitdown.py)
Copyright 2023-2026 @ CAMEL-AI.org. All Rights Reserved.
Licensed under the Apache License, Version 2.0
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterator, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def process_batch(
    items: list[T],
    processor: Callable[[T], R],
    max_workers: int = 4,
) -> Iterator[tuple[int, R | Exception]]:
    """Run ``processor`` over ``items`` on a thread pool.

    Every item is submitted before the first result is awaited. Results
    are yielded in input order together with the item's index; an item
    whose processor raised yields the exception instead, so one failure
    never stops its siblings.

    Args:
        items: Items to process.
        processor: Function to apply to each item.
        max_workers: Maximum concurrent workers.

    Yields:
        Tuples of (index, result_or_exception).
    """
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(processor, item) for item in items]

        for index, future in enumerate(futures):
            try:
                yield index, future.result()
            except Exception as e:
                yield index, e
