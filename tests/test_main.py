import main


def test_list_prints_sketches(capsys):
    assert main.main(["list"]) == 0
    out = capsys.readouterr().out
    assert "inscribed_square" in out
    assert "Text Or Something" in out


def test_unknown_sketch_exits_with_usage_error(capsys):
    assert main.main(["run", "does_not_exist"]) == 2
    assert "Unknown sketch" in capsys.readouterr().err


def test_export_static_sketch_fails(tmp_path, capsys):
    assert main.main(["export", "text", str(tmp_path / "t.gif")]) == 1
    assert "no sequence" in capsys.readouterr().err


def test_run_stops_after_frame_limit():
    assert main.main(["run", "text", "--frames", "3", "--fps", "240"]) == 0

