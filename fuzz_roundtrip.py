"""
Round-trip fuzzing for the DynamicBuffer codec.

Encodes random payloads of random length, checks the stream size and
decodes them back.

Usage:
    python fuzz_roundtrip.py --cases 10000 --seed 0
"""

import argparse
import logging

import numpy as np

from DynamicBuffer.encoding.codec import encode, decode
from DynamicBuffer.encoding.constants import MAX_PAYLOAD_LENGTH
from DynamicBuffer.protocol.stream import CodeUnitStream
from DynamicBuffer.utils.logging import get_logger
from DynamicBuffer.utils.timing import timing_context


def run_fuzz(cases: int, seed: int, max_length: int = MAX_PAYLOAD_LENGTH, log_interval: int = 1000) -> int:
    logger = get_logger()
    rng = np.random.default_rng(seed)
    failures = 0
    total_bytes = 0

    with timing_context("fuzz") as timer:
        for case in range(1, cases + 1):
            length = int(rng.integers(1, max_length + 1))
            payload = rng.integers(0, 255, size=length, dtype=np.uint8, endpoint=True).tobytes()
            total_bytes += length

            stream = encode(payload)
            if len(stream) != 1 + CodeUnitStream.expected_word_count(length):
                failures += 1
                logger.error(f"Case {case}: {len(stream)} code units for {length} bytes")
            elif CodeUnitStream.from_text(stream.to_text()) != stream or decode(stream) != payload:
                failures += 1
                logger.error(f"Case {case}: round trip mismatch for {length} bytes")

            if case % log_interval == 0:
                logger.fuzz_progress(case, cases, failures, bytes=total_bytes)

    logger.info(f"Throughput: {timer.throughput(total_bytes) / 1024:.1f} KiB/s")
    return failures


def main():
    parser = argparse.ArgumentParser(description="Fuzz the DynamicBuffer codec")
    parser.add_argument("--cases", type=int, default=10_000)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--max-length", type=int, default=MAX_PAYLOAD_LENGTH)
    args = parser.parse_args()

    get_logger().set_level(logging.INFO)
    failures = run_fuzz(args.cases, args.seed, args.max_length)
    raise SystemExit(1 if failures else 0)


if __name__ == "__main__":
    main()
