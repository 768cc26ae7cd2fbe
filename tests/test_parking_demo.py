import pytest

from systemdesigns.parking.demo import main


def test_demo_runs_to_completion(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "2 Wheeler parkings"
    assert lines[4] == " 4 wheeler parkings "
    assert lines[-1] == " Payment is done!!!"


def test_demo_lists_six_empty_spots(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    spot_lines = [line for line in lines if line.startswith("[ ")]
    assert len(spot_lines) == 6
    assert all("Empty : 1" in line for line in spot_lines)
    assert [line.endswith("Price : 1 }]") for line in spot_lines] == [
        True, True, True, False, False, False,
    ]


def test_demo_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])