import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, List, Optional

from audio_cleanup.config import CleanupConfig
from audio_cleanup.engine import RunOutcome, process_audio
from audio_cleanup.errors import PreflightError
from audio_cleanup.modes import prompt_for_mode, select_mode
from audio_cleanup.report import format_duration, format_loudness, format_size

logger = logging.getLogger("audio_cleanup")

EXIT_PREFLIGHT = 2


def _clean_dropped_path(raw: str) -> Path:
    """Drag-and-drop into a terminal wraps paths in quotes; strip them."""

    return Path(raw.strip().strip("'\"")).expanduser()


def _printable(path: Path) -> str:
    return str(path).encode("utf-8", "backslashreplace").decode("utf-8")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="audio-cleanup",
        description="Clean and level a recording with ffmpeg, writing a .wav next to a run log.",
    )
    parser.add_argument("input", nargs="?", help="Audio file to process (prompted for when omitted).")
    parser.add_argument(
        "--mode",
        help='"1" for a raw recording (full cleaning); anything else levels a Zoom/Teams recording.',
    )
    return parser


def _print_outcome(outcome: RunOutcome) -> None:
    result = outcome.result
    print()
    if result.succeeded:
        print("=" * 60)
        print(f"SUCCESS  processed in {format_duration(result.duration)}")
        print(f"Output:   {_printable(outcome.request.output_path)} ({format_size(result.output_size_bytes)})")
        print(f"Loudness: {format_loudness(result.integrated_lufs)}")
        print("=" * 60)
    else:
        print("=" * 60)
        print(f"FAILED   ffmpeg exited with code {result.exit_code}")
        print("See the ffmpeg messages printed above for the cause.")
        print("=" * 60)


def main(argv: Optional[List[str]] = None, input_fn: Callable[[str], str] = input) -> int:
    logging.basicConfig(
        level=os.getenv("AUDIO_CLEANUP_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = _build_parser().parse_args(argv)

    if args.input:
        input_path = _clean_dropped_path(args.input)
    else:
        try:
            input_path = _clean_dropped_path(input_fn("Drag and drop the audio file here, then press Enter: "))
        except EOFError:
            input_path = Path("")

    mode = select_mode(args.mode) if args.mode is not None else prompt_for_mode(input_fn)
    config = CleanupConfig.from_env()
    print(f"Mode: {mode.label}")

    try:
        outcome = process_audio(input_path, mode, config)
    except PreflightError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_PREFLIGHT

    _print_outcome(outcome)
    if not outcome.logged:
        print(f"WARNING: the run log could not be updated ({_printable(config.log_path)})", file=sys.stderr)
    if outcome.result.succeeded:
        return 0
    return outcome.result.exit_code if 0 < outcome.result.exit_code < 256 else 1


if __name__ == "__main__":
    sys.exit(main())
