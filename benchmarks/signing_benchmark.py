#!/usr/bin/env python3
"""
Signing Benchmark
=================

Throughput of sign/unsign through the public interface.

Measures:
  - sign, unsign (valid), unsign (invalid)
  - Value size impact (1, 100, 1000 chars)
  - Secret type impact (str secret served from the HMAC cache vs bytes secret)
  - Cached vs uncached keyed-hash provisioning
"""

import logging
import time

from cookie_signature import Signer, SigningConfig, sign, unsign

# Keep per-call debug logging out of the timings
logging.getLogger("cookie_signature").setLevel(logging.WARNING)

ITERATIONS = 100_000
WARMUP = 1_000


# ── Helpers ──────────────────────────────────────────────────────────────────


def benchmark(name: str, func, iterations: int = ITERATIONS) -> dict:
    """Warm up, time ``iterations`` calls and print the result."""
    for _ in range(WARMUP):
        func()

    start = time.perf_counter()
    for _ in range(iterations):
        func()
    elapsed_ms = (time.perf_counter() - start) * 1000

    ops_sec = iterations / elapsed_ms * 1000 if elapsed_ms > 0 else 0.0
    avg_ms = elapsed_ms / iterations

    print(name)
    print(f"  Total time:       {elapsed_ms:.2f}ms")
    print(f"  Operations:       {iterations}")
    print(f"  Ops/sec:          {ops_sec:.0f}")
    print(f"  Avg time per op:  {avg_ms:.4f}ms")
    print()

    return {
        "name": name,
        "total_time": elapsed_ms,
        "operations": iterations,
        "ops_sec": ops_sec,
        "avg_time": avg_ms,
    }


# ── Benchmarks ───────────────────────────────────────────────────────────────


def run_benchmarks(iterations: int = ITERATIONS) -> dict:
    secret = "my-secret-key"
    value = "user-id-12345"
    signed = sign(value, secret)
    tampered = signed + "tampered"

    results = {}

    print("\n🔐 Basic Operations")
    print("-" * 60)
    results["sign"] = benchmark("Sign operation", lambda: sign(value, secret), iterations)
    results["unsign_valid"] = benchmark(
        "Unsign operation (valid)", lambda: unsign(signed, secret), iterations
    )
    results["unsign_invalid"] = benchmark(
        "Unsign operation (invalid)", lambda: unsign(tampered, secret), iterations
    )

    print("\n📊 Value Size Impact")
    print("-" * 60)
    for label, size in (("small", 1), ("medium", 100), ("large", 1000)):
        sized = "a" * size
        results[f"{label}_sign"] = benchmark(
            f"Sign ({label} value: {size} chars)",
            lambda sized=sized: sign(sized, secret),
            iterations,
        )

    print("\n🔑 Secret Type Impact")
    print("-" * 60)
    bytes_secret = secret.encode()
    results["bytes_sign"] = benchmark(
        "Sign with bytes secret", lambda: sign(value, bytes_secret), iterations
    )

    print("\n⚡ Keyed-Hash Cache Impact")
    print("-" * 60)
    uncached = Signer(SigningConfig.create_uncached())
    results["uncached_sign"] = benchmark(
        "Sign with HMAC cache disabled", lambda: uncached.sign(value, secret), iterations
    )
    cached = Signer()
    results["provision_cached"] = benchmark(
        "Provision keyed hash (cached)", lambda: cached.provision(secret), iterations
    )
    results["provision_uncached"] = benchmark(
        "Provision keyed hash (uncached)", lambda: uncached.provision(secret), iterations
    )

    return results


def print_summary(results: dict):
    print("Summary")
    print("=" * 60)
    print()
    print("Basic Operations:")
    print(f"  Sign:                    {results['sign']['ops_sec']:.0f} ops/sec")
    print(f"  Unsign (valid):          {results['unsign_valid']['ops_sec']:.0f} ops/sec")
    print(f"  Unsign (invalid):        {results['unsign_invalid']['ops_sec']:.0f} ops/sec")
    print()
    print("Value Size Impact:")
    print(f"  Small (1 char):          {results['small_sign']['ops_sec']:.0f} ops/sec")
    print(f"  Medium (100 chars):      {results['medium_sign']['ops_sec']:.0f} ops/sec")
    print(f"  Large (1000 chars):      {results['large_sign']['ops_sec']:.0f} ops/sec")
    print()
    print("Secret Type Impact:")
    print(f"  String secret:           {results['sign']['ops_sec']:.0f} ops/sec")
    print(f"  Bytes secret:            {results['bytes_sign']['ops_sec']:.0f} ops/sec")
    print(f"  String, cache disabled:  {results['uncached_sign']['ops_sec']:.0f} ops/sec")
    print(f"  Provision, cached:       {results['provision_cached']['ops_sec']:.0f} ops/sec")
    print(f"  Provision, uncached:     {results['provision_uncached']['ops_sec']:.0f} ops/sec")
    print()


# ── Main ─────────────────────────────────────────────────────────────────────


def main():
    print("🔐 Cookie Signature Performance Benchmarks")
    print("=" * 60)

    try:
        results = run_benchmarks()
        print()
        print_summary(results)

        print("⚠️  Regressions to watch for:")
        print("• Unsign (valid) well above sign time suggests comparison overhead")
        print("• Unsign (invalid) slower than unsign (valid) means the length fast path is gone")
        print("• String secret not faster than bytes secret means the HMAC cache is not hit")
        print()
        print("✅ Benchmark complete!")

    except KeyboardInterrupt:
        print("\n⚠️  Benchmark interrupted by user")


if __name__ == "__main__":
    main()
