"""Run settings, run log and the command-line entry point."""

from __future__ import annotations

import argparse
import dataclasses
import random
import sys
import time
from dataclasses import dataclass

from .configurator import configure
from .generator import GdCaptureGammaGenerator
from .messages import describe_duct, describe_particle, describe_target, describe_veto

_RULE = "================================================================================="
_INFO = "****************Detector Infomation*******************"


@dataclass(frozen=True)
class SimulationSettings:
    """Settings of one simulation run."""

    beam_duct: int = 2
    source_pos: tuple[float, float, float] = (1.7, 0.0, 0.0)
    holder_pos: tuple[float, float, float] = (0.0, 0.0, 0.0)
    target: int = 1
    model: int = 4
    gd_capture: int = 2
    gd_cascade: int = 3
    gd157_file: str = "cont_dat/Gd157_org.dat"
    gd157_table: str = "cont_dat/158GdContTbl__E1SLO4__HFB.npz"
    gd155_file: str = "cont_dat/Gd155.dat"
    gd155_table: str = "cont_dat/156GdContTbl__E1SLO4__HFB.npz"
    particle: int = 2
    emit_pos: tuple[float, float, float] = (1.7, 3.5, -3.9)
    energy_1: float = 5.5
    energy_2: float = 2.5
    veto: int = 1
    bgo_threshold: float = 100.0
    ge_threshold: float = 110.0
    color: int = 1
    info: int = 4
    recreate_file_name: str = "NewMC.root"

    @property
    def shows_continuum_files(self) -> bool:
        return self.target == 1 and self.model == 1 and self.gd_cascade in (1, 3)

    @property
    def uses_particle_gun(self) -> bool:
        return self.particle in (11, 12)


def _short(pos) -> str:
    return "(" + ", ".join(f"{v:.3g}" for v in pos) + ")"


def _fixed(pos) -> str:
    return "(" + ",".join(f"{v:.3f}" for v in pos) + ")"


def _target_info(settings: SimulationSettings) -> str:
    return describe_target(settings.target, settings.model, settings.gd_capture, settings.gd_cascade)


def describe_settings(settings: SimulationSettings) -> str:
    """Return the detector information block shown at start-up."""
    lines = [
        "===============version 10 @2017.03.09=================",
        _INFO,
        "Experiment (beam duct) : " + describe_duct(settings.beam_duct),
        "      Target           : " + _target_info(settings),
        "       VETO            : " + describe_veto(settings.veto),
    ]
    if settings.shows_continuum_files:
        lines.append(
            f"  Continuum Component  : [{settings.gd155_file}] and [{settings.gd157_file}]"
        )
    lines.append("Target Position(x,y,z) : " + _short(settings.source_pos))
    lines.append("Holder Position(x,y,z) : " + _short(settings.holder_pos))
    lines.append("   Incident Particle   : " + describe_particle(settings.particle))
    if settings.uses_particle_gun:
        lines.append("Emission Point (x,y,z) : " + _short(settings.emit_pos))
    if settings.particle == 12:
        lines.append(f" Emission Enrgy [MeV]  : {settings.energy_1:.3g}")
        lines.append(f" Emission Enrgy [MeV]  : {settings.energy_2:.3g}")
    lines.append(_INFO)
    return "\n".join(lines)


def run_log_header(settings: SimulationSettings, seed: int, start: float) -> str:
    """Return the text appended to the run log when a run starts."""
    parts = [
        f"{_RULE} \n",
        "     .....:::::;;;;;##### NewMC.root has been created #####;;;;;:::::.....     \n",
        f"     Random seed       : {seed} \n",
        f"      Start time       : {time.ctime(start)}\n \n",
        f"        VETO           : {describe_veto(settings.veto)} \n",
        f"Experiment (beam duct) : {describe_duct(settings.beam_duct)} \n",
        f"      Target           : {_target_info(settings)} \n",
    ]
    if settings.shows_continuum_files:
        parts.append(
            f"  Continuum Component  : {settings.gd155_file} and {settings.gd157_file} \n"
        )
    parts.append(f"Target Position(x,y,z) : {_fixed(settings.source_pos)} \n")
    parts.append(f"Holder Position(x,y,z) : {_fixed(settings.holder_pos)} \n \n")
    parts.append(f"   Incident Particle   : {describe_particle(settings.particle)} \n")
    if settings.uses_particle_gun:
        parts.append(f"Emission Point (x,y,z) : {_fixed(settings.emit_pos)} \n")
    if settings.particle == 12:
        parts.append(f" Emission Enrgy [MeV]  : {settings.energy_1:.3f} \n")
        parts.append(f" Emission Enrgy [MeV]  : {settings.energy_2:.3f} \n")
    return "".join(parts)


def run_log_footer(start: float, end: float) -> str:
    """Return the text appended to the run log when a run ends."""
    return (
        f"       End time        : {time.ctime(end)}\n"
        f"     Running time      : {end - start:.3f}sec \n"
        f"{_RULE} \n"
    )


def _draw_cascade(generator: GdCaptureGammaGenerator, settings: SimulationSettings):
    if settings.gd_capture == 1:
        return generator.generate_nat_gd()
    if settings.gd_capture == 2:
        draws = {
            1: generator.generate_158gd,
            2: generator.generate_158gd_discrete,
            3: generator.generate_158gd_continuum,
        }
    else:
        draws = {
            1: generator.generate_156gd,
            2: generator.generate_156gd_discrete,
            3: generator.generate_156gd_continuum,
        }
    return draws[settings.gd_cascade]()


def _parse(argv):
    parser = argparse.ArgumentParser(
        prog="annrigd", description="Gd(n,g) gamma-ray cascades for the ANNRI detector setup."
    )
    parser.add_argument("--events", type=int, default=0, help="number of cascades to draw")
    parser.add_argument("--seed", type=int, help="random seed")
    parser.add_argument("--log", default="MC.log", help="run log appended to")
    parser.add_argument("--capture", type=int, choices=(1, 2, 3), help="1 natural, 2 157Gd, 3 155Gd")
    parser.add_argument("--cascade", type=int, choices=(1, 2, 3),
                        help="1 both, 2 discrete, 3 continuum")
    parser.add_argument("--gd156-table", help="look-up table of the 156Gd continuum")
    parser.add_argument("--gd158-table", help="look-up table of the 158Gd continuum")
    args = parser.parse_args(argv)
    if args.events < 0:
        parser.error("--events must not be negative")
    return parser, args


def main(argv=None) -> int:
    """Print the settings, write the run log and draw capture cascades."""
    parser, args = _parse(argv)
    overrides = {
        key: value
        for key, value in (
            ("gd_capture", args.capture),
            ("gd_cascade", args.cascade),
            ("gd155_table", args.gd156_table),
            ("gd157_table", args.gd158_table),
        )
        if value is not None
    }
    settings = dataclasses.replace(SimulationSettings(), **overrides)
    if args.events and not (settings.target == 1 and settings.model == 4):
        parser.error("cascades can only be drawn for a Gd target with the ANNRI-Gd model")

    print("\n")
    print(describe_settings(settings))
    print("\n")

    start = int(time.time())
    seed = args.seed if args.seed is not None else random.Random(start).randrange(2**31)
    rng = random.Random(seed)
    with open(args.log, "a", encoding="utf-8") as log:
        log.write(run_log_header(settings, seed, start))
        log.flush()
        if args.events:
            generator = GdCaptureGammaGenerator(rng=rng)
            configure(
                generator,
                settings.gd_capture,
                settings.gd_cascade,
                settings.gd155_table,
                settings.gd157_table,
            )
            for _ in range(args.events):
                energies = [p.e_tot for p in _draw_cascade(generator, settings)]
                print(" ".join([str(len(energies)), *(f"{e:.6f}" for e in energies)]))
        end = int(time.time())
        log.write(run_log_footer(start, end))
    sys.stdout.flush()
    return 0