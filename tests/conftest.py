import pytest

PREAMBLE = [
    "Log file open, 05/14/25 10:23:45",
    "LogWindows: Failed to load 'aqProf.dll' (GetLastError=126)",
    "LogInit: Display: Running engine for game: ShooterGame",
]

VERSION_LINE = "[2025.05.14-10.23.46:120][  0]LogShooter: Display: Branch: release-08.09"

STORE_EVENT = (
    "[2025.05.14-10.23.50:001][ 12]LogPlatformCommon: Platform HTTP Query End. "
    "QueryName: [GetStore], URL [GET /store/v2/storefronts/abc], TraceID: [xyz123] "
    "Response Code: [200], Seconds Since Query [0.451]"
)

WALLET_EVENT = (
    "[2025.05.14-10.23.51:002][ 13]LogPlatformCommon: Platform HTTP Query End. "
    "QueryName: [GetWallet], URL [GET https://pd.eu.a.pvp.net/store/v1/wallet/abc], "
    "TraceID: [t0000aa] Response Code: [200], Seconds Since Query [0.12]"
)

WARNING_EVENT = (
    "[2025.05.14-10.23.52:003][ 14]LogPlatformCommon: Warning: Platform HTTP Query "
    "retrying in 5 seconds"
)


def http_event_line(name, trace_id="abc123", code="200", seconds="0.5",
                    method="GET", url="/some/path"):
    return (
        "[2025.05.14-10.24.00:000][ 20]LogPlatformCommon: Platform HTTP Query End. "
        f"QueryName: [{name}], URL [{method} {url}], TraceID: [{trace_id}] "
        f"Response Code: [{code}], Seconds Since Query [{seconds}]"
    )


@pytest.fixture
def sample_log_lines():
    return PREAMBLE + [VERSION_LINE, STORE_EVENT, WARNING_EVENT, WALLET_EVENT]


@pytest.fixture
def log_dir(tmp_path):
    path = tmp_path / "Logs"
    path.mkdir()
    return path


@pytest.fixture
def write_log(log_dir):
    """Write a list of lines as a log file inside log_dir; returns its path."""
    def _write(name, lines):
        path = log_dir / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)
    return _write
