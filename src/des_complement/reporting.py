"""Reporting for complement verification runs.

Contains:
- TraceRecorder: JSON Lines trace of each verification step
- format_result / format_summary: text blocks for the CLI
- console_reporter: reporter callable that echoes a result
- export_to_json: JSON report for a batch of results
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, TextIO

import click

from .interfaces import VerificationResult
from .utils import bytes_to_hex, count_differing_bits, format_blocks, split_blocks


# ------------------------------------------------------------------
# TraceRecorder  –  JSON Lines step trace
# ------------------------------------------------------------------

class TraceRecorder:
    """
    Records the intermediate values of a verification run.

    Every record is kept in memory; when trace_file is set it is also
    written as one JSON object per line. With verbose on, each step is
    echoed as a compact line.
    """

    def __init__(self, verbose: bool = False, trace_file: TextIO | None = None):
        self.verbose = verbose
        self.trace_file = trace_file
        self._records: list[dict[str, Any]] = []

    def record(self, **kwargs) -> None:
        """Record a trace entry."""
        self._records.append(kwargs)

        if self.trace_file:
            self._write_jsonl(kwargs)

        if self.verbose:
            self._print_verbose(kwargs)

    def _write_jsonl(self, record: dict[str, Any]) -> None:
        serializable = self._make_serializable(record)
        self.trace_file.write(json.dumps(serializable) + "\n")
        self.trace_file.flush()

    def _make_serializable(self, obj: Any) -> Any:
        if isinstance(obj, dict):
            return {k: self._make_serializable(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [self._make_serializable(item) for item in obj]
        else:
            return obj

    def _print_verbose(self, record: dict[str, Any]) -> None:
        step = record.get("step", "unknown")
        fields = " ".join(
            f"{k}={v}" for k, v in record.items() if k != "step"
        )
        click.echo(f"  [{step:20s}] {fields}")

    def get_records(self) -> list[dict[str, Any]]:
        return list(self._records)


# ------------------------------------------------------------------
# Text formatting
# ------------------------------------------------------------------

def format_result(result: VerificationResult) -> str:
    """Format a verification result as a multi-line block."""
    lines = [
        f"Mode:                 {result.mode.upper()}",
        f"Key:                  {bytes_to_hex(result.key)}",
        f"Plaintext:            {format_blocks(result.plaintext, result.block_size)}",
        f"Cipher E(K,P):        {format_blocks(result.cipher, result.block_size)}",
        f"Complement key:       {bytes_to_hex(result.complement_key)}",
        f"Complement plaintext: {format_blocks(result.complement_plaintext, result.block_size)}",
        f"Complement Cipher:    {format_blocks(result.complement_cipher, result.block_size)}",
        f"~Cipher:              {format_blocks(result.expected_complement_cipher, result.block_size)}",
    ]

    if len(result.block_matches) > 1:
        marks = " ".join("ok" if ok else "XX" for ok in result.block_matches)
        lines.append(f"Blocks:               {marks}")

    first = result.first_mismatch_block
    if first is not None:
        actual = split_blocks(result.complement_cipher, result.block_size)
        expected = split_blocks(result.expected_complement_cipher, result.block_size)
        diff = count_differing_bits(actual[first], expected[first])
        lines.append(
            f"First mismatch:       block {first} "
            f"({diff}/{result.block_size * 8} bits differ)"
        )

    status = "PASS" if result.matches else "FAIL"
    marker = "[OK]" if result.matches else "[ERROR]"
    lines.append(f"Verification: {marker} {status}")
    return "\n".join(lines)


def format_summary(results: list[VerificationResult]) -> str:
    """One line per result plus a pass count."""
    if not results:
        return "No results."

    lines = []
    for i, r in enumerate(results):
        status = "OK" if r.matches else "FAIL"
        lines.append(
            f"  #{i + 1:<4d} {bytes_to_hex(r.key)} "
            f"blocks={len(r.block_matches)} {status}"
        )
    passed = sum(1 for r in results if r.matches)
    lines.append(f"{passed}/{len(results)} matched")
    return "\n".join(lines)


def console_reporter(echo: Callable[[str], None] = click.echo) -> Callable[[VerificationResult], None]:
    """Build a reporter that prints the two compared ciphertexts."""

    def report(result: VerificationResult) -> None:
        echo(
            f"Complement Cipher: {bytes_to_hex(result.complement_cipher)}, "
            f"Cipher: {bytes_to_hex(result.expected_complement_cipher)}"
        )

    return report


# ------------------------------------------------------------------
# File export
# ------------------------------------------------------------------

def export_to_json(
    results: list[VerificationResult],
    output_path: str | Path,
    indent: int = 2,
) -> Path:
    """Export verification results to JSON file.

    Args:
        results: Results from a batch of verifications
        output_path: Path to output JSON file
        indent: JSON indentation level

    Returns:
        Path to written file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "version": "1.0",
        "count": len(results),
        "matched": sum(1 for r in results if r.matches),
        "results": [r.to_dict() for r in results],
    }

    with open(output_path, "w") as f:
        json.dump(data, f, indent=indent)

    return output_path
