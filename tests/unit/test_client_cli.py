"""Тесты для CLI exerciser (src.client.cli)."""

import json

from src.client.cli import main
from src.gateway import AccessGateway


class TestClientCLI:
    """Тесты main()."""

    def test_forward_and_backward_reads(self, capsys):
        exit_code = main(["--offset", "3"])
        out = capsys.readouterr().out.splitlines()

        assert exit_code == 0
        assert out[:4] == ["Writing to fibonacci, returned the sequence 1"] * 4
        assert out[4:8] == [
            "Reading from fibonacci at offset 0, returned the sequence 0.",
            "Reading from fibonacci at offset 1, returned the sequence 1.",
            "Reading from fibonacci at offset 2, returned the sequence 1.",
            "Reading from fibonacci at offset 3, returned the sequence 2.",
        ]
        assert out[8:] == list(reversed(out[4:8]))

    def test_default_offset_reaches_ceiling(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out

        assert (
            "Reading from fibonacci at offset 100, returned the sequence "
            "354224848179261915075." in out
        )

    def test_offset_above_ceiling_reads_clamped(self, capsys):
        assert main(["--offset", "12", "--max-n", "10"]) == 0
        out = capsys.readouterr().out

        assert "at offset 12, returned the sequence 55." in out

    def test_json_output(self, capsys):
        assert main(["--offset", "2", "--json"]) == 0
        lines = capsys.readouterr().out.splitlines()

        payloads = [json.loads(line) for line in lines]
        assert len(payloads) == 6
        assert payloads[2] == {"schema_version": "1", "index": 2, "digits": "1", "count": 1}

    def test_busy_device(self, capsys):
        gateway = AccessGateway()
        gateway.open_session()

        assert main(["--offset", "1"], gateway=gateway) == 1
        assert "in use" in capsys.readouterr().err
        gateway.close_session()

    def test_session_closed_after_run(self):
        gateway = AccessGateway()

        assert main(["--offset", "1"], gateway=gateway) == 0
        assert not gateway.is_session_active

    def test_capacity_overflow(self, capsys):
        exit_code = main(["--offset", "30", "--capacity", "5"])

        assert exit_code == 3
        assert "Carry overflow" in capsys.readouterr().err

    def test_truncate_policy_completes(self):
        assert main(["--offset", "30", "--capacity", "5", "--overflow-policy", "TRUNCATE"]) == 0

    def test_invalid_config(self, capsys):
        assert main(["--max-n", "0"]) == 2
        assert "max_n" in capsys.readouterr().err

    def test_negative_offset(self, capsys):
        assert main(["--offset", "-1"]) == 2
