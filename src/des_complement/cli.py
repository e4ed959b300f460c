"""Command-line interface for the DES complementation demonstration."""

from __future__ import annotations

import json
import sys

import click

from . import DEFAULT_KEY_HEX, DEFAULT_PT_HEX, __version__
from .errors import ComplementError
from .golden import DES_TEST_VECTORS, FIPS_81_ECB_VECTOR
from .interfaces import SUPPORTED_MODES, CipherConfig, VerificationResult
from .randomness import RandomSource
from .reporting import (
    TraceRecorder,
    console_reporter,
    export_to_json,
    format_result,
    format_summary,
)
from .utils import bytes_to_hex
from .verifier import ComplementVerifier

_mode_option = click.option(
    "--mode",
    type=click.Choice(SUPPORTED_MODES),
    default="cbc",
    show_default=True,
    help="DES chaining mode (CBC uses an all-zero IV)",
)


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _property_holds(result: VerificationResult) -> bool:
    """Whether the result satisfies the property where it is guaranteed.

    Under CBC only the first block is guaranteed: later blocks chain a
    complemented ciphertext into a complemented plaintext, and the two
    complements cancel.
    """
    if result.mode == "ecb":
        return result.matches
    return bool(result.block_matches) and result.block_matches[0]


@click.group()
@click.version_option(version=__version__, prog_name="des-complement")
def main() -> None:
    """DES complementation property: E(~K, ~P) == ~E(K, P).

    Encrypts a plaintext under a key, encrypts the complemented
    plaintext under the complemented key, and checks the second
    ciphertext is the complement of the first.
    """
    pass


@main.command()
@click.argument("key", default=DEFAULT_KEY_HEX, required=False)
@click.argument("plaintext", default=DEFAULT_PT_HEX, required=False)
@_mode_option
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option(
    "--trace",
    "trace_path",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write a JSON Lines trace of every step to FILE",
)
@click.option("--verbose", "-v", is_flag=True, help="Echo each step as it runs")
def verify(
    key: str,
    plaintext: str,
    mode: str,
    as_json: bool,
    trace_path: str | None,
    verbose: bool,
) -> None:
    """Verify the property for KEY and PLAINTEXT (hex)."""
    reporter = None if as_json else console_reporter()
    verifier = ComplementVerifier(config=CipherConfig(mode=mode), reporter=reporter)

    try:
        if trace_path:
            with open(trace_path, "w") as trace_file:
                tracer = TraceRecorder(verbose=verbose, trace_file=trace_file)
                result = verifier.verify(key, plaintext, tracer=tracer)
        else:
            tracer = TraceRecorder(verbose=verbose) if verbose else None
            result = verifier.verify(key, plaintext, tracer=tracer)
    except ComplementError as e:
        _fail(str(e))
    except OSError as e:
        _fail(f"Cannot write trace file: {e}")

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        click.echo(format_result(result))

    sys.exit(0 if result.matches else 1)


@main.command()
@click.argument("key")
@click.argument("plaintext")
@_mode_option
def encrypt(key: str, plaintext: str, mode: str) -> None:
    """Encrypt PLAINTEXT (hex) under KEY (hex) with DES, no padding."""
    verifier = ComplementVerifier(config=CipherConfig(mode=mode))
    try:
        click.echo(verifier.encrypt(key, plaintext))
    except ComplementError as e:
        _fail(str(e))


@main.command()
@click.argument("value")
def complement(value: str) -> None:
    """Print the bitwise complement of VALUE (hex)."""
    try:
        click.echo(ComplementVerifier().complement(value))
    except ComplementError as e:
        _fail(str(e))


@main.command()
@click.option("--verbose", "-v", is_flag=True, help="Show every vector")
def vectors(verbose: bool) -> None:
    """Check DES known-answer vectors and the property on each."""
    cbc = ComplementVerifier(config=CipherConfig(mode="cbc"))
    ecb = ComplementVerifier(config=CipherConfig(mode="ecb"))

    checks = [(cbc, vec) for vec in DES_TEST_VECTORS]
    checks.append((ecb, FIPS_81_ECB_VECTOR))

    click.echo("Running DES known-answer tests...")
    failed = 0

    for i, (verifier, vec) in enumerate(checks):
        label = f"  KAT {i + 1} ({verifier.config.mode.upper()})"
        try:
            ciphertext = verifier.encrypt_bytes(vec["key"], vec["plaintext"])
            result = verifier.verify(
                bytes_to_hex(vec["key"]), bytes_to_hex(vec["plaintext"])
            )
        except ComplementError as e:
            failed += 1
            click.echo(f"{label}: FAIL - {e}")
            continue

        if ciphertext != vec["ciphertext"]:
            failed += 1
            click.echo(
                f"{label}: FAIL - expected {bytes_to_hex(vec['ciphertext'])}, "
                f"got {bytes_to_hex(ciphertext)}"
            )
        elif not result.matches:
            failed += 1
            click.echo(f"{label}: FAIL - complement property does not hold")
        elif verbose:
            click.echo(
                f"{label}: PASS {bytes_to_hex(ciphertext)} / "
                f"{bytes_to_hex(result.complement_cipher)}"
            )

    passed = len(checks) - failed
    click.echo(f"Known-answer tests: {passed}/{len(checks)} passed")
    sys.exit(0 if failed == 0 else 1)


@main.command()
@click.option("--n", "num_tests", type=click.IntRange(min=1), default=100, show_default=True,
              help="Number of random key/plaintext pairs")
@click.option("--seed", type=int, default=None,
              help="Random seed for reproducibility")
@click.option("--blocks", type=click.IntRange(min=1), default=1, show_default=True,
              help="Plaintext length in 8-byte blocks")
@_mode_option
@click.option("--out", "output_path", type=click.Path(dir_okay=False), default=None,
              help="Write a JSON report to this file")
@click.option("--verbose", "-v", is_flag=True, help="List every vector")
def sweep(
    num_tests: int,
    seed: int | None,
    blocks: int,
    mode: str,
    output_path: str | None,
    verbose: bool,
) -> None:
    """Verify the property on random keys and plaintexts."""
    verifier = ComplementVerifier(config=CipherConfig(mode=mode))
    rng = RandomSource(seed=seed)

    click.echo(f"Running {num_tests} random tests: mode={mode.upper()} blocks={blocks}")

    results: list[VerificationResult] = []
    for key_hex, pt_hex in rng.vectors(num_tests, blocks=blocks):
        results.append(verifier.verify(key_hex, pt_hex))

    if verbose:
        click.echo(format_summary(results))

    matched = sum(1 for r in results if r.matches)
    held = sum(1 for r in results if _property_holds(r))
    click.echo(f"Full ciphertext matched: {matched}/{num_tests}")
    if mode == "cbc" and blocks > 1:
        click.echo(f"First block matched:     {held}/{num_tests}")
        click.echo("Note: CBC chaining breaks the property after the first block")

    if output_path:
        path = export_to_json(results, output_path)
        click.echo(f"Report: {path}")

    sys.exit(0 if held == num_tests else 1)


if __name__ == "__main__":
    main()
