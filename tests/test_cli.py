import pytest

from goedel.cli import main


def test_encode_positional(capsys):
    assert main(["9", "81", "230"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["9 -> 512", "81 -> 768", "230 -> 108"]


def test_options(capsys):
    assert main(["230", "--offset", "1", "-q"]) == 0
    assert capsys.readouterr().out.strip() == "3240"
    assert main(["230", "--reverse", "-q"]) == 0
    assert capsys.readouterr().out.strip() == "675"


@pytest.mark.parametrize("argv", [["-1"], ["3.5"], ["abc"], ["5", "--offset", "-1"], ["--range", "-5", "3"]])
def test_invalid_arguments(capsys, argv):
    assert main(argv) == 2
    assert capsys.readouterr().err.startswith("Error:")


def test_requires_input():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_range(capsys):
    assert main(["--range", "8", "11", "--no-progress"]) == 0
    assert capsys.readouterr().out.splitlines() == ["8 -> 256", "9 -> 512", "10 -> 2"]


def test_collisions(capsys):
    assert main(["--range", "0", "300", "--collisions", "--no-progress"]) == 0
    out = capsys.readouterr().out
    assert "108: 23, 230" in out
    assert "4: 2, 20, 200" in out


def test_plot(tmp_path):
    out = tmp_path / "g.png"
    assert main(["--range", "1", "50", "--plot", str(out), "--no-progress"]) == 0
    assert out.exists()


def test_collisions_quiet(capsys):
    assert main(["--range", "0", "300", "--collisions", "--no-progress", "-q"]) == 0
    out = capsys.readouterr().out
    assert "108: 23, 230" in out
    assert "colliding encodings" not in out


def test_collisions_and_plot_are_exclusive(capsys, tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--range", "0", "10", "--collisions", "--plot", str(tmp_path / "g.png")])
    assert excinfo.value.code == 2
    assert "not allowed with" in capsys.readouterr().err
    assert not (tmp_path / "g.png").exists()


def test_bad_limit_setting(monkeypatch, capsys):
    monkeypatch.setenv("GOEDEL_INT_MAX_STR_DIGITS", "abc")
    with pytest.raises(SystemExit) as excinfo:
        main(["9"])
    assert excinfo.value.code == 2
    assert "GOEDEL_INT_MAX_STR_DIGITS" in capsys.readouterr().err
