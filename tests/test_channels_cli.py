"""Tests for scripts/channels_cli.py against a temporary registry directory."""

import importlib.util
import json
from pathlib import Path

import httpx
import pytest
import structlog

CLI_PATH = Path(__file__).parent.parent / "scripts" / "channels_cli.py"


@pytest.fixture(scope="module")
def cli():
    spec = importlib.util.spec_from_file_location("channels_cli", CLI_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def run(cli, tmp_path, capsys):
    def _run(*argv: str) -> tuple[int, str, str]:
        code = cli.main(["--storage-dir", str(tmp_path), *argv])
        out, err = capsys.readouterr()
        return code, out, err

    yield _run
    # main() points structlog at the captured stderr of this test
    structlog.reset_defaults()


class TestChannelsCli:
    def test_register_resolve_list(self, run):
        assert run("register", "General", "0xchannel1")[0] == 0

        code, out, _ = run("resolve", "#general", "0xother")
        assert code == 0
        assert out.splitlines() == ["#general\t0xchannel1", "0xother\t0xother"]

        code, out, _ = run("list")
        assert "#general: 0xchannel1" in out

    def test_reverse(self, run):
        run("register", "general", "0xchannel1")

        assert run("reverse", "0xchannel1")[1].strip() == "#general"
        assert "No name registered" in run("reverse", "0xunknown")[1]

    def test_unknown_name_exits_nonzero(self, run):
        code, _, err = run("resolve", "#missing")
        assert code == 1
        assert "Channel name not found: #missing" in err

    def test_conflict_exits_nonzero(self, run):
        run("register", "general", "0xA")
        code, _, err = run("register", "general", "0xB")
        assert code == 1
        assert "already registered to 0xA" in err

    def test_export_import(self, run, tmp_path):
        run("register", "general", "0xchannel1")

        code, out, _ = run("export")
        assert json.loads(out) == {"general": "0xchannel1"}

        snapshot = tmp_path / "snapshot.json"
        snapshot.write_text(json.dumps({"random": "0xchannel2"}))
        assert run("import", str(snapshot), "--replace")[0] == 0

        code, out, _ = run("export")
        assert json.loads(out) == {"random": "0xchannel2"}

    def test_import_invalid_snapshot(self, run, tmp_path):
        snapshot = tmp_path / "bad.json"
        snapshot.write_text("[1, 2, 3]")

        code, _, err = run("import", str(snapshot))
        assert code == 1
        assert "Invalid registry snapshot" in err

    def test_import_missing_file(self, run, tmp_path):
        code, _, err = run("import", str(tmp_path / "absent.json"))
        assert code == 1
        assert "Error:" in err

    def test_export_keeps_registration_order(self, run):
        run("register", "zeta", "0xz")
        run("register", "alpha", "0xa")

        assert list(json.loads(run("export")[1])) == ["zeta", "alpha"]

    def test_clear_force(self, run):
        run("register", "general", "0xchannel1")
        run("register", "random", "0xchannel2")

        code, out, _ = run("clear", "--force")
        assert code == 0
        assert "Cleared 2 channels" in out
        assert "No channels registered" in run("list")[1]

    def test_no_command(self, run):
        assert run()[0] == 1


@pytest.fixture
def fullnode(monkeypatch):
    """Point the CLI's SuinsClient at a scripted transport."""
    from messaging_names import suins

    real_client = suins.SuinsClient

    def install(handler):
        monkeypatch.setattr(
            suins,
            "SuinsClient",
            lambda: real_client(
                rpc_url="https://fullnode.test.sui.io:443",
                transport=httpx.MockTransport(handler),
                max_retries=1,
                retry_delay=0.0,
            ),
        )

    return install


class TestAccountCommands:
    def test_resolve_account(self, run, fullnode):
        fullnode(lambda request: httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "result": "0xalice"}))

        code, out, _ = run("resolve-account", "alice.sui", "0xbob")

        assert code == 0
        assert out.splitlines() == ["alice.sui\t0xalice", "0xbob\t0xbob"]

    def test_http_failure_exits_nonzero(self, run, fullnode):
        fullnode(lambda request: httpx.Response(503))

        code, _, err = run("resolve-account", "alice.sui")

        assert code == 1
        assert "Error:" in err

    def test_rpc_error_exits_nonzero(self, run, fullnode):
        fullnode(
            lambda request: httpx.Response(
                200, json={"jsonrpc": "2.0", "id": 1, "error": {"code": -32000, "message": "node overloaded"}}
            )
        )

        code, _, err = run("reverse-account", "0xalice")

        assert code == 1
        assert "node overloaded" in err
