from unittest import mock

from PIL import Image

from puzzlebox.collage import cli


def test_main_without_arguments_prints_usage(capsys):
    assert cli.main([]) == 0
    assert "USAGE" in capsys.readouterr().out


def test_unknown_command_prints_usage(capsys):
    cli.main(["dance"])
    assert "nasacollage solve <dir> <ground row size>" in capsys.readouterr().out


def test_solve_wrong_argument_count(capsys):
    cli.main(["solve", "only-dir"])
    assert "USAGE" in capsys.readouterr().out


def test_solve_missing_directory(tmp_path, capsys):
    cli.main(["solve", str(tmp_path / "absent"), "1"])
    captured = capsys.readouterr()
    assert "USAGE" in captured.out
    assert captured.err


def test_solve_bad_ground_size(tmp_path, capsys):
    cli.main(["solve", str(tmp_path), "x"])
    captured = capsys.readouterr()
    assert "'x'" in captured.err


def test_solve_small_directory(tmp_path, capsys):
    Image.new("RGB", (4, 4)).save(tmp_path / "a.png")
    Image.new("RGB", (4, 8)).save(tmp_path / "b.png")
    assert cli.main(["solve", str(tmp_path), "1"]) == 0
    assert "USAGE" not in capsys.readouterr().out


def test_scrape_prints_urls(capsys):
    urls = ["http://archive.example.com/image/a.jpg"]
    with mock.patch.object(cli, "scrape_image_urls", return_value=iter(urls)):
        assert cli.main(["scrape"]) == 0
    assert capsys.readouterr().out == "http://archive.example.com/image/a.jpg\n"