import argparse
import logging

from dsl import run_headless, run_script
from sand_constants import MATRIX_SIZE, STEP_MS
from scenes import SCENES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Falling sand under a tiltable gravity angle.")
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run without a window for a duration and print ASCII board state.",
    )
    parser.add_argument(
        "--scene",
        default="default",
        choices=sorted(SCENES),
        help="Initial scene to load.",
    )
    parser.add_argument(
        "--angle",
        type=int,
        default=0,
        help="Gravity angle in degrees, clamped to [-360, 360]. 0 points down.",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=MATRIX_SIZE,
        help="Grid edge length in cells.",
    )
    parser.add_argument(
        "--duration-ms",
        type=int,
        default=5000,
        help="Duration to simulate in headless mode.",
    )
    parser.add_argument(
        "--step-ms",
        type=int,
        default=STEP_MS,
        help="Tick interval of the interactive window.",
    )
    parser.add_argument(
        "--script",
        help="Tiny DSL: commands separated by newlines/semicolons: scene NAME | angle DEG | tick N | wait_ms MS | add | remove | fill X,Y | clear X,Y",
    )
    parser.add_argument(
        "--script-file",
        help="Path to a script file using the DSL (ignored if --script is provided).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )
    return parser


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.size <= 0:
        parser.error("--size must be positive")
    if args.step_ms <= 0:
        parser.error("--step-ms must be positive")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    script_text = None
    if args.script:
        script_text = args.script
    elif args.script_file:
        with open(args.script_file, "r") as fh:
            script_text = fh.read()

    if script_text is not None:
        run_script(script_text, default_scene_name=args.scene, size=args.size, angle=args.angle)
        return

    if args.headless:
        run_headless(args.duration_ms, scene_name=args.scene, size=args.size, angle=args.angle)
        return

    from game import run_game

    run_game(scene_name=args.scene, size=args.size, angle=args.angle, step_ms=args.step_ms)


if __name__ == "__main__":
    main()
