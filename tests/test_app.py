import matplotlib

matplotlib.use("Agg")

import pytest

from pigeonplan.app import main


def test_main_saves_png(tmp_path):
    out = tmp_path / "plot.png"
    assert main(["--seed", "1", "--output", str(out)]) == 0
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_main_rejects_bad_seed():
    with pytest.raises(SystemExit) as info:
        main(["--seed", "notanumber"])
    assert info.value.code == 2