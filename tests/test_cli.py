"""Tests for the CLI interface."""
import json
import subprocess
import sys
from pathlib import Path

CLI = [sys.executable, "-m", "planar_nfp"]
ROOT = Path(__file__).parent.parent


def run_cli(*args: str) -> subprocess.CompletedProcess:
    result = subprocess.run(
        [*CLI, *args],
        capture_output=True, text=True, cwd=str(ROOT),
    )
    assert result.returncode == 0, f"CLI failed: {result.stderr}\n{result.stdout}"
    return result


class TestVersion:
    def test_version(self):
        assert "planar-nfp v" in run_cli("version").stdout


class TestDemo:
    def test_demo_default(self):
        data = json.loads(run_cli("demo").stdout)
        assert data["ok"] is True
        assert data["square"]["area"] == 4.0
        assert data["square"]["convex"] is True
        assert len(data["triangulation"]) == 2
        assert len(data["merged"]) == 4
        assert data["nfp"]["vertex_count"] == 7
        assert data["nfp"]["convex"] is True

    def test_demo_side(self):
        data = json.loads(run_cli("demo", "--side", "4").stdout)
        assert data["square"]["area"] == 16.0
