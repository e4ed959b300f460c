"""Tests for the des-complement command-line interface."""

import json

import pytest
from click.testing import CliRunner

from des_complement.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestVerifyCommand:
    """Tests for 'verify'."""

    def test_defaults_pass(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["verify"])

        assert result.exit_code == 0
        assert "Key:                  133457799BBCDFF1" in result.output
        assert "Complement Cipher:    7A17ECABF0F54BFA" in result.output
        assert "[OK] PASS" in result.output

    def test_prints_compared_ciphertexts_line(self, runner: CliRunner) -> None:
        """The reporter line with both compared values comes first."""
        result = runner.invoke(main, ["verify"])

        assert result.exit_code == 0
        assert result.output.splitlines()[0] == (
            "Complement Cipher: 7A17ECABF0F54BFA, Cipher: 7A17ECABF0F54BFA"
        )

    def test_json_output_has_no_reporter_line(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["verify", "--json"])

        assert result.exit_code == 0
        assert "Complement Cipher:" not in result.output

    def test_zero_inputs(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["verify", "0000000000000000", "0000000000000000"])

        assert result.exit_code == 0
        assert "8CA64DE9C1B123A7" in result.output
        assert "7359B2163E4EDC58" in result.output

    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["verify", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["matches"] is True
        assert data["complement_cipher_hex"] == "7A17ECABF0F54BFA"

    def test_cbc_two_blocks_exit_one(self, runner: CliRunner) -> None:
        result = runner.invoke(
            main, ["verify", "133457799BBCDFF1", "0123456789ABCDEF0123456789ABCDEF"]
        )

        assert result.exit_code == 1
        assert "[ERROR] FAIL" in result.output

    def test_ecb_two_blocks_pass(self, runner: CliRunner) -> None:
        result = runner.invoke(
            main,
            ["verify", "133457799BBCDFF1", "0123456789ABCDEF0123456789ABCDEF", "--mode", "ecb"],
        )

        assert result.exit_code == 0
        assert "Mode:                 ECB" in result.output

    @pytest.mark.parametrize(
        "args,message",
        [
            (["verify", "1334", "0123456789ABCDEF"], "Key must be 8 bytes"),
            (["verify", "133457799BBCDFF1", "0123"], "multiple of 8"),
            (["verify", "133457799BBCDFFZ", "0123456789ABCDEF"], "non-hex"),
            (["verify", "133457799BBCDFF", "0123456789ABCDEF"], "even length"),
        ],
    )
    def test_precondition_errors(self, runner: CliRunner, args: list, message: str) -> None:
        result = runner.invoke(main, args)

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert message in result.output
        assert "PASS" not in result.output

    def test_trace_file(self, runner: CliRunner, tmp_path) -> None:
        trace = tmp_path / "trace.jsonl"
        result = runner.invoke(main, ["verify", "--trace", str(trace)])

        assert result.exit_code == 0
        records = [json.loads(line) for line in trace.read_text().splitlines()]
        assert [r["step"] for r in records][0] == "encrypt"
        assert records[-1]["matches"] is True

    def test_verbose(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["verify", "-v"])

        assert result.exit_code == 0
        assert "[encrypt_complemented" in result.output


class TestSmallCommands:
    """Tests for 'encrypt' and 'complement'."""

    def test_encrypt(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["encrypt", "133457799BBCDFF1", "0123456789ABCDEF"])

        assert result.exit_code == 0
        assert result.output.strip() == "85E813540F0AB405"

    def test_encrypt_bad_alignment(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["encrypt", "133457799BBCDFF1", "01"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_complement(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["complement", "0123456789abcdef"])

        assert result.exit_code == 0
        assert result.output.strip() == "FEDCBA9876543210"

    def test_complement_empty(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["complement", ""])

        assert result.exit_code == 0
        assert result.output.strip() == ""

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestVectorsCommand:
    """Tests for 'vectors'."""

    def test_all_pass(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["vectors", "-v"])

        assert result.exit_code == 0
        assert "Known-answer tests: 6/6 passed" in result.output
        assert "KAT 6 (ECB): PASS" in result.output


class TestSweepCommand:
    """Tests for 'sweep'."""

    def test_single_block(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["sweep", "--n", "25", "--seed", "3"])

        assert result.exit_code == 0
        assert "Full ciphertext matched: 25/25" in result.output

    def test_cbc_multi_block_reports_first_block(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["sweep", "--n", "10", "--seed", "3", "--blocks", "2"])

        assert result.exit_code == 0
        assert "Full ciphertext matched: 0/10" in result.output
        assert "First block matched:     10/10" in result.output

    def test_ecb_multi_block(self, runner: CliRunner) -> None:
        result = runner.invoke(
            main, ["sweep", "--n", "10", "--seed", "3", "--blocks", "3", "--mode", "ecb"]
        )

        assert result.exit_code == 0
        assert "Full ciphertext matched: 10/10" in result.output

    def test_json_report(self, runner: CliRunner, tmp_path) -> None:
        out = tmp_path / "sweep.json"
        result = runner.invoke(main, ["sweep", "--n", "4", "--seed", "9", "--out", str(out)])

        assert result.exit_code == 0
        data = json.loads(out.read_text())
        assert data["count"] == 4
        assert data["matched"] == 4

    @pytest.mark.parametrize("n", ["0", "-3"])
    def test_count_must_be_positive(self, runner: CliRunner, n: str) -> None:
        result = runner.invoke(main, ["sweep", "--n", n])

        assert result.exit_code == 2
        assert "Full ciphertext matched" not in result.output

    def test_blocks_must_be_positive(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["sweep", "--blocks", "0"])

        assert result.exit_code == 2
