import dataclasses

import pytest

from annrigd.app import (
    SimulationSettings,
    describe_settings,
    main,
    run_log_footer,
    run_log_header,
)
from annrigd.continuum import LookupTable


def test_describe_settings_default():
    text = describe_settings(SimulationSettings())
    assert "Experiment (beam duct) : 2014B0124 (Al+LiF)" in text
    assert "Target Position(x,y,z) : (1.7, 0, 0)" in text
    assert "       VETO            : BGO veto detectors are working!!" in text
    assert "Emission Point" not in text
    assert "Continuum Component" not in text


def test_describe_settings_particle_gun_two_gammas():
    settings = dataclasses.replace(SimulationSettings(), particle=12)
    lines = describe_settings(settings).splitlines()
    assert "Emission Point (x,y,z) : (1.7, 3.5, -3.9)" in lines
    assert " Emission Enrgy [MeV]  : 5.5" in lines
    assert " Emission Enrgy [MeV]  : 2.5" in lines


def test_describe_settings_continuum_files():
    settings = dataclasses.replace(SimulationSettings(), model=1, gd_cascade=1)
    text = describe_settings(settings)
    assert "[cont_dat/Gd155.dat] and [cont_dat/Gd157_org.dat]" in text


def test_run_log_header():
    header = run_log_header(SimulationSettings(), 42, 0)
    assert "     Random seed       : 42 \n" in header
    assert "Holder Position(x,y,z) : (0.000,0.000,0.000) \n \n" in header
    assert header.startswith("=" * 81 + " \n")


def test_run_log_footer():
    footer = run_log_footer(100, 110)
    assert "     Running time      : 10.000sec \n" in footer
    assert footer.endswith("=" * 81 + " \n")


def test_main_writes_log(tmp_path, capsys):
    log = tmp_path / "run.log"
    assert main(["--log", str(log), "--seed", "7"]) == 0
    content = log.read_text()
    assert "     Random seed       : 7 \n" in content
    assert "Running time" in content
    assert "Detector Infomation" in capsys.readouterr().out


def test_main_discrete_cascades(tmp_path, capsys):
    log = tmp_path / "run.log"
    main(["--log", str(log), "--seed", "3", "--events", "5", "--cascade", "2"])
    lines = [line for line in capsys.readouterr().out.splitlines() if line and line[0].isdigit()]
    assert len(lines) == 5
    for line in lines:
        count, *energies = line.split()
        assert int(count) == len(energies) > 0


def test_main_continuum_cascades_conserve_energy(tmp_path, capsys):
    table = tmp_path / "gd158.npz"
    LookupTable([0.0, 8.0], [0.0, 1.0], [[1.0]]).save(table)
    main(
        ["--log", str(tmp_path / "run.log"), "--seed", "11", "--events", "3",
         "--cascade", "3", "--gd158-table", str(table)]
    )
    lines = [line for line in capsys.readouterr().out.splitlines() if line and line[0].isdigit()]
    assert len(lines) == 3
    for line in lines:
        _, *energies = line.split()
        assert sum(float(e) for e in energies) == pytest.approx(7.937, abs=1e-4)


def test_main_rejects_negative_events(tmp_path):
    with pytest.raises(SystemExit):
        main(["--log", str(tmp_path / "run.log"), "--events", "-1"])