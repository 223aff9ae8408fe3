import argparse
import sys
from pathlib import Path

from nslogger.config import DecoderSettings, get_settings
from nslogger.logging import create_logger, get_ring_buffer
from nslogger.parsing.stream import decode_stream_result
from nslogger.rendering import RECORD_FORMATS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nslogger-decode", description="Decode an NSLogger binary log file to text.")
    parser.add_argument("path", type=str, help="Path of the raw NSLogger file.")
    parser.add_argument("-s", "--separator", type=str, default=None, help="Field separator (default ',').")
    parser.add_argument("--format", dest="output_format", choices=RECORD_FORMATS, default=None, help="Output line format.")
    parser.add_argument("-o", "--output", type=str, default=None, help="Output path (default '<path>.txt').")
    parser.add_argument("--legacy-boundary", action="store_true", help="Do not decode a final message that reaches the end of the file.")
    parser.add_argument("--strict", action="store_true", help="Fail when a frame's declared size disagrees with its parts.")
    parser.add_argument("--allow-user-keys", action="store_true", help="Decode part keys >= 100 instead of failing.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log decoder events to stderr.")
    return parser


def settings_from_args(args: argparse.Namespace, base: DecoderSettings) -> DecoderSettings:
    overrides = {}
    if args.separator is not None:
        overrides["separator"] = args.separator
    if args.output_format is not None:
        overrides["output_format"] = args.output_format
    if args.legacy_boundary:
        overrides["legacy_boundary"] = True
    if args.strict:
        overrides["strict_frame_size"] = True
    if args.allow_user_keys:
        overrides["allow_user_keys"] = True
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return base.model_copy(update=overrides)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args, get_settings())
    stream = sys.stderr if args.verbose else None
    logger = create_logger("nslogger", settings.log_ring_size, settings.log_level.upper(), stream, settings.log_file)
    logger.setLevel(settings.log_level.upper())
    ring = get_ring_buffer(logger)
    if ring is not None:
        ring.clear()

    source = Path(args.path)
    target = Path(args.output) if args.output else source.with_name(source.name + settings.output_suffix)
    try:
        buffer = source.read_bytes()
    except OSError as exc:
        sys.stderr.write(f"error: cannot read {source}: {exc}\n")
        return 2

    result = decode_stream_result(buffer, settings=settings)
    if result.error is not None:
        sys.stderr.write(f"error: {result.error}\n")
        if ring is not None and not args.verbose:
            for line in ring.format_events():
                sys.stderr.write(f"  {line}\n")
        return 1

    try:
        target.write_text(result.text, encoding="utf-8")
    except OSError as exc:
        sys.stderr.write(f"error: cannot write {target}: {exc}\n")
        return 2
    logger.info("Decoded %d messages to %s", result.message_count, target)
    return 0


if __name__ == "__main__":
    sys.exit(main())
